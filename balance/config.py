import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    QUIT_COMMAND = os.getenv("BALANCE_QUIT_COMMAND", "sair")
    CORRECT_MESSAGE = os.getenv("BALANCE_CORRECT_MESSAGE", "Resultado: Correto")
    INCORRECT_MESSAGE = os.getenv("BALANCE_INCORRECT_MESSAGE", "Resultado: Incorreto")
    PROMPT = os.getenv("BALANCE_PROMPT", "Digite a expressão: ")
    LOG_LEVEL = os.getenv("BALANCE_LOG_LEVEL", "WARNING").upper()

config = Config()
