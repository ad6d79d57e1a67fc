"""Rastreador de finanças pessoais: bot do Telegram sobre Supabase."""

__version__ = "0.1.0"
