"""Default configuration values."""

VERSION = 2  # fixed symbol version
SIZE = 17 + 4 * VERSION  # modules per side (25)
CAPACITY = 44  # bytes per packed payload
PAD_BYTES = (0xEC, 0x11)  # filler sequence, repeated
FINDER_SIZE = 7  # finder square edge, separator excluded
TIMING_INDEX = 6  # row and column carrying the timing tracks
DEFAULT_SIZE_PX = 256  # canvas edge in pixels
DEFAULT_QUIET_PX = 24  # blank margin on every edge
DEFAULT_COLOR_FG = 0  # black
DEFAULT_COLOR_BG = 255  # white
REFERENCE_ERROR = "q"  # error level of the standards-compliant host symbol
DURATION_MS = 120_000  # listening countdown
ANCHOR_SESSION_ID = "anchor-session-001"
