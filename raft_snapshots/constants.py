# Largest 32-bit signed integer
MAX_INT = 2**31 - 1

# Sentinel for "never snapshot based on entry count"
SNAPSHOTS_DISABLED = MAX_INT

MIN_ENTRIES_TO_SNAPSHOT_FLOOR = 1
# MAX_INT itself is taken by the sentinel
MIN_ENTRIES_TO_SNAPSHOT_CEIL = MAX_INT - 1

# Timing constants (in milliseconds)
ONE_SECOND = 1_000
TWELVE_HOURS = 12 * 60 * 60 * ONE_SECOND
SNAPSHOT_CHECK_INTERVAL = 60 * 60 * ONE_SECOND  # 1 hour

# Relative paths are resolved against the working directory by the snapshot writer
DEFAULT_SNAPSHOTS_DIRECTORY = "snapshots"

# Key of the snapshots block inside a full agent configuration file
SNAPSHOTS_SECTION = "snapshots"
