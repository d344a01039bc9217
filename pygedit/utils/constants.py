APP_ORG = "PyGedit"
APP_NAME = "PyGedit"
DIST_NAME = "pygedit"
APP_ICON = "accessories-text-editor"  # freedesktop icon theme name

TEXT_FILE_FILTER = "Text Files (*.txt);;All Files (*)"
MODIFIED_PROMPT = "The document has been modified.\nDo you want to save your changes?"
ABOUT_TEXT = (
    "{app} {version} - A simple PyQt6 text editor inspired by gedit.\n\n"
    "Built with PyQt6."
)

STATUS_READY = "Ready"
STATUS_LOADED = "File loaded"
STATUS_SAVED = "File saved"

DEFAULT_STATUS_TIMEOUT_MS = 2000
DEFAULT_TAB_WIDTH = 4
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
