# finance_tracker/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Configurações do Telegram
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")
WEBHOOK_PATH = os.getenv("WEBHOOK_PATH", "/webhook")

# Configurações do Supabase (chave anon: o RLS isola os dados de cada usuário)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Configurações do Gemini API (opcional, usado só para sugerir categorias)
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

# Nível de log do pacote (INFO, DEBUG, ...)
LOG_LEVEL = os.getenv("FINANCE_TRACKER_LOG_LEVEL", "INFO")
