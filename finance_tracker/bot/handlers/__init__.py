from .states import (
    ASKING_AMOUNT,
    ASKING_CATEGORY,
    ASKING_CONFIRMATION,
    ASKING_DATE,
    ASKING_DESCRIPTION,
    ASKING_TYPE,
)
from .handle_confirmation import handle_confirmation
from .handle_fields import (
    handle_amount,
    handle_category,
    handle_date,
    handle_description,
    handle_type,
)
from .start_form import cancel_command, edit_transaction_command, new_transaction_command

# Estado da conversa -> handler da resposta do usuário
FORM_HANDLERS = {
    ASKING_TYPE: handle_type,
    ASKING_AMOUNT: handle_amount,
    ASKING_DESCRIPTION: handle_description,
    ASKING_CATEGORY: handle_category,
    ASKING_DATE: handle_date,
    ASKING_CONFIRMATION: handle_confirmation,
}
