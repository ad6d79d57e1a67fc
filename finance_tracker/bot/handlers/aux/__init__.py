from .prompts import ask_amount, ask_category, ask_date, ask_description, ask_type
from .register import register_transaction
from .send_confirmation_message import send_confirmation_message
