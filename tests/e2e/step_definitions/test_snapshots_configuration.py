"""Step definitions for snapshots configuration scenarios."""

import json
import subprocess
import sys
from pathlib import Path

import pytest
from pytest_bdd import parsers, scenarios, then, when


# Helper functions
def extract_json_from_output(stdout):
    """Extract and parse JSON from command output."""
    lines = stdout.split("\n")
    json_lines = []
    in_json = False

    for line in lines:
        if line.strip().startswith("{"):
            in_json = True
        if in_json:
            json_lines.append(line)
        if in_json and line.strip().endswith("}"):
            break

    if json_lines:
        return json.loads("\n".join(json_lines))
    return None


# Load scenarios from the feature file
scenarios("../features/snapshots_configuration.feature")


@pytest.fixture
def project_root():
    """Get the path to the project root."""
    return Path(__file__).parent.parent.parent.parent


@pytest.fixture
def fixtures_dir():
    """Get the path to test fixtures directory."""
    return Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def command_result():
    """Store the result of running a command."""
    return {}


def run_checker(project_root, command_result, args):
    """Run the checker as a module and store its output."""
    try:
        result = subprocess.run(
            [sys.executable, "-m", "raft_snapshots.main", *args],
            capture_output=True,
            text=True,
            timeout=10,
            cwd=project_root,
        )
    except subprocess.TimeoutExpired:
        pytest.fail("Command timed out")

    command_result["returncode"] = result.returncode
    command_result["stdout"] = result.stdout
    command_result["stderr"] = result.stderr


# When steps
@when(parsers.parse('I run the checker with args "{args}"'))
def run_with_args(project_root, command_result, args):
    run_checker(project_root, command_result, args.split())


@when(
    parsers.parse('I run the checker with config file "{config_file}" and args "{args}"')
)
def run_with_config_and_args(
    project_root, fixtures_dir, command_result, config_file, args
):
    run_checker(
        project_root,
        command_result,
        ["--config", str(fixtures_dir / config_file), *args.split()],
    )


# Then steps
@then(parsers.parse("the exit code must be {code:d}"))
def check_exit_code(command_result, code):
    """Check the exit code of the last command."""
    assert command_result["returncode"] == code, (
        f"Expected exit code {code}, got {command_result['returncode']}. "
        f"stdout: {command_result['stdout']}, stderr: {command_result['stderr']}"
    )


@then(parsers.parse('the config must contain "{key}" with value "{expected_value}"'))
def check_config_value(command_result, key, expected_value):
    """Assert that the printed config holds the expected key-value pair."""
    config_data = extract_json_from_output(command_result["stdout"])
    if config_data is None:
        pytest.fail(f"No JSON config found in stdout: {command_result['stdout']}")

    actual_value = str(config_data.get(key, ""))
    assert actual_value == expected_value, (
        f"Expected {key}='{expected_value}', got {key}='{actual_value}'. "
        f"Full config: {config_data}"
    )


@then(parsers.parse('the log must contain "{expected_text}"'))
def check_log_contains_text(command_result, expected_text):
    """Check that the output contains the expected text."""
    combined_output = command_result["stdout"] + command_result["stderr"]
    assert expected_text in combined_output, (
        f"Expected text '{expected_text}' not found in output. "
        f"stdout: {command_result['stdout']}, stderr: {command_result['stderr']}"
    )
