"""
ui_helpers.py
=============
Stateless narration helpers shared by the CLI and the Streamlit interface.

These functions turn engine notices, the final notebook and accusation
results into the game's (Portuguese) text. They carry no game state of their
own and perform no I/O, so they can be tested in isolation.

Contains:
  - render_welcome()          : opening banner
  - render_notice(s)()        : per-room narration and command feedback
  - render_clue_listing()     : final notebook with 1-based indices
  - render_accusation_prompt(): suspects the player may accuse
  - render_verdict()          : evidence analysis and verdict block
  - build_css()               : dark-noir CSS for the Streamlit page
"""

from __future__ import annotations

from typing import Iterable, List

from clue_notebook import OrderedClueSet
from config import COMMAND_CONFIG, CommandConfig
from models import AccusationResult, Action, Notice, NoticeKind

GAME_TITLE = "DETECTIVE QUEST - NIVEL MESTRE"
RULE = "=" * 40

_DIRECTION_WORDS = {
    Action.GO_LEFT:  "esquerda",
    Action.GO_RIGHT: "direita",
}


def key_for(action: Action, commands: CommandConfig = COMMAND_CONFIG) -> str:
    """Key shown to the player for `action`, preferring the lowercase form."""
    keys = {
        Action.GO_LEFT:     commands.go_left,
        Action.GO_RIGHT:    commands.go_right,
        Action.END_SESSION: commands.end_session,
    }[action]
    return min(keys, key=lambda k: (k != k.lower(), k))


def render_welcome(commands: CommandConfig = COMMAND_CONFIG) -> List[str]:
    left, right, end = (key_for(a, commands) for a in Action)
    return [
        f"=== BEM-VINDO AO {GAME_TITLE} ===",
        "Explore a mansao misteriosa, colete pistas e desvende quem e o culpado!",
        f"Use '{left}' para ir a esquerda, '{right}' para direita e '{end}' para encerrar.",
        "As pistas serao associadas automaticamente aos suspeitos!",
        "No final, voce devera fazer uma acusacao baseada nas evidencias!",
    ]


def render_notice(notice: Notice, commands: CommandConfig = COMMAND_CONFIG) -> List[str]:
    """Narrate one engine notice as a list of lines."""
    kind = notice.kind

    if kind is NoticeKind.ROOM_ENTERED:
        return ["", f"=== {GAME_TITLE} ===", f"Voce esta na: {notice.room}"]

    if kind is NoticeKind.CLUE_FOUND:
        if notice.suspect is not None:
            association = f"Esta pista aponta para: {notice.suspect}"
        else:
            association = "Pista nao associada a nenhum suspeito conhecido."
        return [
            "",
            "*** PISTA ENCONTRADA! ***",
            f"Pista: {notice.clue}",
            association,
            "Pista adicionada ao seu caderno de investigacao!",
        ]

    if kind is NoticeKind.NO_CLUE:
        return ["", "Esta sala nao contem pistas visiveis."]

    if kind is NoticeKind.DEAD_END:
        return [
            "",
            "Voce chegou ao fim deste caminho!",
            "Esta sala nao possui mais saidas.",
            f"Pressione '{key_for(Action.END_SESSION, commands)}' "
            "para sair ou explore outro caminho.",
        ]

    if kind is NoticeKind.OPTIONS:
        lines = ["", "Opcoes de navegacao:"]
        for option in notice.options:
            key = key_for(option.action, commands)
            if option.action is Action.END_SESSION:
                lines.append(f"({key}) - Encerrar investigacao e fazer acusacao final")
            else:
                word = _DIRECTION_WORDS[option.action]
                lines.append(f"({key}) - Ir para a {word}: {option.target}")
        return lines

    if kind is NoticeKind.MOVED:
        return ["", f"Movendo-se para a {_DIRECTION_WORDS[notice.action]}..."]

    if kind is NoticeKind.INVALID_MOVE:
        word = _DIRECTION_WORDS[notice.action]
        return ["", f"Nao ha caminho a {word}! Tente outra direcao."]

    if kind is NoticeKind.UNRECOGNIZED_COMMAND:
        left, right, end = (key_for(a, commands) for a in Action)
        return [
            "",
            f"Opcao invalida! Use '{left}' para esquerda, '{right}' para direita "
            f"ou '{end}' para sair.",
        ]

    if kind is NoticeKind.SESSION_ENDED:
        return ["", "=== RELATORIO FINAL DE INVESTIGACAO ===", "Investigacao da mansao encerrada!"]

    raise ValueError(f"unknown notice kind: {kind!r}")


def render_notices(
    notices: Iterable[Notice],
    commands: CommandConfig = COMMAND_CONFIG,
) -> List[str]:
    lines: List[str] = []
    for notice in notices:
        lines.extend(render_notice(notice, commands))
    return lines


def render_clue_listing(clues: OrderedClueSet) -> List[str]:
    """
    The notebook in alphabetical order with 1-based indices and a total.

    An empty notebook yields the "no evidence" message instead, and the
    accusation phase is skipped by the caller.
    """
    if not clues:
        return [
            "",
            "Nenhuma pista foi coletada durante a investigacao.",
            "Impossivel fazer uma acusacao sem evidencias!",
        ]
    lines = ["", "Pistas coletadas (em ordem alfabetica):", RULE]
    lines.extend(f"{i}. {clue}" for i, clue in enumerate(clues, 1))
    lines.append(RULE)
    lines.append(f"Total de pistas coletadas: {len(clues)}")
    return lines


def render_accusation_prompt(suspects: Iterable[str]) -> List[str]:
    return [
        "",
        "=== FASE DE ACUSACAO FINAL ===",
        "Com base nas pistas coletadas, voce deve fazer sua acusacao!",
        f"Suspeitos disponiveis: {', '.join(suspects)}",
    ]


def verdict_headline(result: AccusationResult) -> str:
    return "*** PARABENS! ***" if result.solved else "*** CASO NAO RESOLVIDO ***"


def render_verdict(result: AccusationResult) -> List[str]:
    """Evidence analysis followed by the verdict for one accusation."""
    name = result.accused
    lines = [
        "",
        "=== ANALISE DAS EVIDENCIAS ===",
        f"Suspeito acusado: {name}",
        f"Pistas que apontam para {name}: {result.match_count}",
    ]
    if result.matching_clues:
        lines.append("")
        lines.append("Pistas encontradas:")
        lines.extend(f"   - {clue}" for clue in result.matching_clues)

    lines.extend(["", "=== VEREDICTO ===", verdict_headline(result)])
    if result.solved:
        lines.extend([
            "Voce resolveu o caso com sucesso!",
            f"Ha evidencias suficientes ({result.match_count} pistas) "
            "para sustentar sua acusacao.",
            f"{name} foi preso(a) e confessou o crime!",
            "A mansao misteriosa finalmente pode descansar em paz.",
        ])
    else:
        lines.extend([
            "Evidencias insuficientes para uma condenacao.",
            "Voce precisa de pelo menos 2 pistas convincentes para sustentar a acusacao.",
        ])
        if result.match_count == 1:
            lines.append("Apenas 1 pista foi encontrada - nao e suficiente para o tribunal.")
        else:
            lines.append(f"Nenhuma pista aponta para {name}.")
        lines.append("O caso permanece em aberto...")
    return lines


def render_farewell() -> List[str]:
    return ["", "Obrigado por jogar Detective Quest - Nivel Mestre!"]


# ---------------------------------------------------------------------------
# Dark-noir CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the dark-noir CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    /* ── Global dark background ── */
    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0a0a0a 0%, #141414 60%, #0d0d0d 100%) !important;
        color: #c0c0c0 !important;
    }

    /* ── Sidebar ── */
    [data-testid="stSidebar"], section[data-testid="stSidebar"] > div {
        background-color: #0d0d0d !important;
        border-right: 1px solid #222 !important;
    }
    [data-testid="stSidebar"] p,
    [data-testid="stSidebar"] li,
    [data-testid="stSidebar"] h3 { color: #c0c0c0 !important; }

    /* ── Typography ── */
    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000; letter-spacing: 3px;
    }
    .sub-header {
        text-align: center; color: #666;
        font-family: 'Courier Prime', monospace; font-style: italic;
    }

    /* ── Narration log ── */
    .narration {
        background: linear-gradient(145deg, #1a1a1a, #2d2d2d);
        padding: 20px; border-radius: 5px;
        border-left: 4px solid #8B0000;
        font-family: 'Courier Prime', monospace; white-space: pre-wrap;
    }

    /* ── Notebook ── */
    .detective-notes {
        background: linear-gradient(145deg, #2a2a1a, #1a1a0a);
        padding: 20px; border-radius: 5px; border: 1px solid #4a4a2a;
        font-family: 'Courier Prime', monospace;
    }

    /* ── Verdict ── */
    .verdict {
        font-size: 40px; font-weight: bold; text-align: center;
        color: #8B0000; font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000;
    }

    /* ── Buttons ── */
    .stButton > button {
        background: linear-gradient(145deg, #2d2d2d, #1a1a1a);
        color: #c0c0c0; border: 1px solid #444;
        font-family: 'Courier Prime', monospace; min-height: 60px !important;
    }
    .stButton > button:hover { border-color: #8B0000; color: #8B0000; }
    .stButton > button:disabled { opacity: 0.35; }

    /* ── Inputs ── */
    .stTextInput input {
        background-color: #141414 !important; color: #c0c0c0 !important;
        border: 1px solid #333 !important; font-family: 'Courier Prime', monospace;
    }
"""
