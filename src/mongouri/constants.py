"""Constants and static configuration for the mongouri parser."""

# Connection string grammar
SCHEME = "mongodb://"
DEFAULT_PORT = 27017  # Used whenever a host token omits its port
SOCKET_SUFFIX = ".sock"  # Marks a host token as a Unix domain socket path
ESCAPE_CHAR = "\\"
MAX_PORT = 65535

# Option coercion families (keys are matched case-insensitively)
INT_OPTIONS = frozenset([
    "connecttimeoutms",
    "sockettimeoutms",
    "maxpoolsize",
    "minpoolsize",
    "maxidletimems",
    "waitqueuemultiple",
    "waitqueuetimeoutms",
    "wtimeoutms",
])
BOOL_OPTIONS = frozenset(["journal", "slaveok", "ssl"])
WRITE_CONCERN_OPTION = "w"
TAG_SETS_OPTION = "readpreferencetags"

# 32-bit option values
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# Client adapter constants
CLIENT_TIMEOUT = 30.0  # seconds
SLAVE_OK_READ_PREFERENCE = "secondaryPreferred"

# Application constants
VERSION = "0.1.0"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
MIN_ARGS = 1  # the connection string
