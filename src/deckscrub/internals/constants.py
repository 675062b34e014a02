"""Application-wide constants and configuration values."""

# Comment store page size used when nothing else is configured. Only affects the number
# of list round trips, never which comments get deleted.
DEFAULT_COMMENT_PAGE_SIZE: int = 100

# Suffix appended to the input file's stem when saving a cleaned copy. A timestamp is
# added on save to prevent clobbering earlier runs.
OUTPUT_FILENAME_SUFFIX = "_cleaned"

# Relationship types linking a slide part to its comments part.
# Legacy comments (PowerPoint 2007 - 2019):
RT_LEGACY_COMMENTS = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/comments"
)
# Modern threaded comments (Microsoft 365):
RT_MODERN_COMMENTS = "http://schemas.microsoft.com/office/2018/10/relationships/comments"

NS_PML = "http://schemas.openxmlformats.org/presentationml/2006/main"
NS_PML_MODERN_COMMENTS = "http://schemas.microsoft.com/office/powerpoint/2018/8/main"

# Fallback for get_debug_mode() in utils
DEBUG_MODE_DEFAULT = False  # Hard-coded default
