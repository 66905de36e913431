"""
Centralized constants for the flow document generator.
Layout numbers mirror the document definition handed to the layout engines.
"""

# ===========================================
# DOCUMENT LAYOUT
# ===========================================
KEY_COLUMN_WIDTH = 200                # first column of key/value tables (pt)
AUTO_WIDTH = 'auto'                   # column sized by the layout engine
CONDITION_OPERATOR_WIDTH = 100        # operator column of condition tables
HEADING_MARGIN = (0, 10)              # (horizontal, vertical)
INTRO_MARGIN = (0, 10, 0, 5)          # (left, top, right, bottom)
CONDITION_TABLE_MARGIN = (15, 5, 0, 0)
ACTION_TABLE_MARGIN = (0, 0, 0, 10)
PARAMETER_TABLE_MARGIN = (15, 0, 0, 10)
SUMMARY_MARGIN = (0, 5)

TABLE_LAYOUT_LIGHT = 'lightHorizontalLines'
BOLD_STYLE = 'bold'

# ===========================================
# FONTS & LOCALES
# ===========================================
DEFAULT_FONT = 'NotoSans'
FALLBACK_PDF_FONT = 'Helvetica'
FALLBACK_PDF_BOLD_FONT = 'Helvetica-Bold'
DEFAULT_LOCALE = 'en'
SUPPORTED_OUTPUT_FORMATS = ['docx', 'pdf', 'json']

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/flowdoc.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
