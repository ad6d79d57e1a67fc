# --- Estados da Conversa do formulário de transação ---
ASKING_TYPE = 0
ASKING_AMOUNT = 1
ASKING_DESCRIPTION = 2
ASKING_CATEGORY = 3
ASKING_DATE = 4
ASKING_CONFIRMATION = 5

PENDING_KEY = "pending_transaction"

# Na edição (ou correção), este texto mantém o valor atual do campo
KEEP_VALUE = "-"
