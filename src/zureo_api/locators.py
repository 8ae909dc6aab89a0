# CSS selectors of the Zureo web UI.

# login
COMPANY_INPUT = "#empresaLogin"
USER_INPUT = "#usuarioLogin"
PASSWORD_INPUT = "#passwordLogin"
LOGIN_SUBMIT = 'button[type="submit"]'

# modals
MODAL = ".modal-content"
MODAL_BODY = ".modal-body"
MODAL_CONTINUE = "button.z-btn.btn-primary"
MODAL_PRIMARY = "button.btn-primary"

ACTIVE_SESSION_TEXT = "Su sesión se encuentra activa en otro dispositivo"
CONFIRM_ADJUSTMENT_TEXT = "Se ajustará el stock"

# shared autocomplete
SUGGESTION = "a[ng-bind-html]"

# stock report
STOCK_ROUTE = "informes/stockarticulo"
PREVIOUS_SEARCH_PANEL = "div.z-div-collapse"
STOCK_SEARCH_INPUT = "#id_0"
STOCK_QUERY_BUTTON = "#consultar"
STOCK_RESULT_HEADING = "h1.z-heading.m-n.ng-binding"

# stock adjustment
ADJUST_ROUTE = "ajustar"
ADJUSTMENT_TYPE = "#tipoAjuste"
ADJUSTMENT_TYPE_VALUE = "number:1"
ARTICLE_INPUT = "#articulo"
CURRENT_STOCK_INPUT = 'input[ng-model="z.filtros.tengo"]'
TARGET_QUANTITY_INPUT = "#deboTener"
ADD_MOVEMENT_BUTTON = "button.btn-agregar:not([disabled])"
SAVE_BUTTON = "button.btn-primary.z-button"
