import argparse
import logging
from typing import List, Optional

from .checker import check
from .config import config

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def banner(quit_command: str) -> List[str]:
    return [
        "--- Verificador de Parametrização Correta (Pilha Dinâmica) ---",
        "Use parênteses (), colchetes [] e chaves {}.",
        f"Digite '{quit_command}' para terminar o programa.",
        "------------------------------------------------------------",
    ]


def setup_logging(level_name: str):
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
        logger.warning(f"Unknown log level {level_name!r}, using WARNING")
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)


def verdict_message(expression: str) -> str:
    return check(expression).message(config.CORRECT_MESSAGE, config.INCORRECT_MESSAGE)


def is_quit_command(line: str) -> bool:
    return line.lower() == config.QUIT_COMMAND.lower()


def run_interactive():
    for line in banner(config.QUIT_COMMAND):
        print(line)

    while True:
        try:
            expression = input(f"\n{config.PROMPT}")
        except EOFError:
            logger.info("End of input")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted")
            break

        if is_quit_command(expression):
            break

        print(verdict_message(expression))

    print("\nPrograma encerrado.")


def run_batch(expressions: List[str]) -> int:
    all_balanced = True
    for expression in expressions:
        verdict = check(expression)
        print(f"{expression}: {verdict.message(config.CORRECT_MESSAGE, config.INCORRECT_MESSAGE)}")
        all_balanced = all_balanced and verdict.balanced
    return 0 if all_balanced else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="balance-check",
        description="Verifica se (), [] e {} estão corretamente balanceados.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressões a verificar; sem argumentos abre o modo interativo",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(config.LOG_LEVEL)

    if args.expressions:
        return run_batch(args.expressions)

    run_interactive()
    return 0
