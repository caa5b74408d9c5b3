"""
cli.py
======
Command-line interface for Detective Quest: The Mysterious Mansion.

Provides the text-based game loop. All game logic is delegated to the
exploration engine and the accusation evaluator; this module only handles
I/O and exit codes.

Usage:
    python cli.py          (or the ``detective-quest`` console script)

Commands during play:
    e / E   go to the left room ("esquerda")
    d / D   go to the right room ("direita")
    s / S   end the investigation and make the final accusation

Exit codes:
    0  normal completion, whatever the verdict
    1  the game could not be initialised
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable

from dotenv import load_dotenv
from pydantic import ValidationError

from accusation import evaluate_accusation
from config import HashConfig, LogConfig
from game_engine import create_session
from ui_helpers import (
    render_accusation_prompt,
    render_clue_listing,
    render_farewell,
    render_notices,
    render_verdict,
    render_welcome,
)

logger = logging.getLogger("detective_quest.cli")

ACTION_PROMPT     = "\nEscolha sua acao: "
ACCUSATION_PROMPT = "\nQuem voce acusa do crime? "


def _emit(write: Callable[[str], None], lines: Iterable[str]) -> None:
    for line in lines:
        write(line)


def run_cli(
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """
    Main CLI game loop.

    Builds the mansion and the suspect table, lets the player explore until
    they end the session, lists the notebook and runs the accusation.

    Args:
        read_line: Prompt-and-read function; ``input`` by default.
        write:     Line printer; ``print`` by default.

    Returns:
        The process exit code.
    """
    _emit(write, render_welcome())

    try:
        bucket_count = HashConfig.from_env().bucket_count
        session, dataset = create_session(bucket_count)
    except (ValidationError, ValueError, MemoryError) as exc:
        logger.error("Game initialisation failed: %s", exc, exc_info=True)
        write("Erro: Nao foi possivel preparar a mansao e a tabela de suspeitos!")
        return 1

    _emit(write, render_notices(session.start()))

    try:
        while not session.ended:
            command = read_line(ACTION_PROMPT).strip()
            _emit(write, render_notices(session.handle(command)))

        _emit(write, render_clue_listing(session.clues))
        if session.clues:
            _emit(write, render_accusation_prompt(dataset.suspects))
            accused = read_line(ACCUSATION_PROMPT)
            result = evaluate_accusation(session.clues, session.table, accused)
            _emit(write, render_verdict(result))
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed; leaving the game.")
        write("")

    logger.info(
        "Game over: rooms_visited=%d, clues_seen=%d, notebook=%d",
        session.rooms_visited,
        session.clues_seen,
        len(session.clues),
    )
    _emit(write, render_farewell())
    return 0


def main(
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    load_dotenv()
    try:
        log_config = LogConfig.from_env()
    except ValueError as exc:
        log_config = LogConfig()
        failure = exc
    else:
        failure = None

    # Logs go to stderr so they never interleave with the narration on stdout.
    logging.basicConfig(
        level=log_config.level,
        format=log_config.format,
        datefmt=log_config.datefmt,
        stream=sys.stderr,
    )
    if failure is not None:
        logger.error("Invalid logging configuration: %s", failure)
        write(f"Erro: configuracao de log invalida ({failure}).")
        return 1
    return run_cli(read_line, write)


if __name__ == "__main__":
    sys.exit(main())
