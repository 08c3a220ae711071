"""
MediaWiki API vocabulary: parameter names, action names, keywords and result
field names. Consult the MediaWiki API documentation for their meaning.
"""

# Request parameters
ACTION = "action"
FORMAT = "format"
FORMAT_JSON = "json"
LIST = "list"
PROP = "prop"
SEPARATOR = "|"

# Actions
ACTION_LOGIN = "login"
ACTION_LOGOUT = "logout"
ACTION_QUERY = "query"
ACTION_TOKENS = "tokens"

# action=login
LG_NAME = "lgname"
LG_PASSWORD = "lgpassword"
LG_TOKEN = "lgtoken"

# action=query&list=...
LIST_USERCONTRIBS = "usercontribs"
LIST_USERS = "users"

# action=query&prop=info
PROP_INFO = "info"
TITLES = "titles"

# action=tokens
TOKENS_TYPE = "type"

# list=usercontribs
UC_DIR = "ucdir"
UC_DIR_NEWER = "newer"
UC_END = "ucend"
UC_LIMIT = "uclimit"
UC_NAMESPACE = "ucnamespace"
UC_PROP = "ucprop"
UC_START = "ucstart"
UC_USER = "ucuser"

# list=users
US_PROP = "usprop"
US_PROP_REGISTRATION = "registration"
US_USERS = "ususers"

# Result fields
RESULT_ERROR = "error"
RESULT_ERROR_CODE = "code"
RESULT_ERROR_INFO = "info"

RESULT_LG_RESULT = "result"
RESULT_LG_TOKEN = "token"
RESULT_LG_NEED_TOKEN = "NeedToken"
RESULT_LG_NOT_EXISTS = "NotExists"
RESULT_LG_SUCCESS = "Success"
RESULT_LG_WRONG_PASS = "WrongPass"

RESULT_PAGES = "pages"
RESULT_PAGE_ID = "pageid"
RESULT_PAGE_NS = "ns"
RESULT_PAGE_TITLE = "title"
RESULT_PAGE_MISSING = "missing"

# Must be formatted with the token type.
RESULT_TOKENS = "%stoken"

RESULT_USERCONTRIBS = "usercontribs"
RESULT_UC_TIMESTAMP = "timestamp"

RESULT_USERS = "users"
RESULT_US_ID = "userid"
RESULT_US_MISSING = "missing"
RESULT_US_NAME = "name"
RESULT_US_REGISTRATION = "registration"

# Token types
TOKEN_BLOCK = "block"
TOKEN_CENTRAL_AUTH = "centralauth"
TOKEN_DELETE = "delete"
TOKEN_DELETE_GLOBAL_ACCOUNT = "deleteglobalaccount"
TOKEN_EDIT = "edit"
TOKEN_EMAIL = "email"
TOKEN_IMPORT = "import"
TOKEN_MOVE = "move"
TOKEN_OPTIONS = "options"
TOKEN_PATROL = "patrol"
TOKEN_PROTECT = "protect"
TOKEN_SET_GLOBAL_ACCOUNT_STATUS = "setglobalaccountstatus"
TOKEN_UNBLOCK = "unblock"
TOKEN_WATCH = "watch"
