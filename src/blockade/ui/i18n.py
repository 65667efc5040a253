"""Internationalisation strings for the Blockade UI.

Usage::

    from blockade.ui.i18n import t, set_language

    set_language("Portuguese")
    print(t().btn_obstacle)          # "Colocar obstáculo"
    print(t().rejection(Rejection.BLOCKED))
"""

from __future__ import annotations

from dataclasses import dataclass

from blockade.core.enums import Rejection


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str
    menu_language: str

    # ── Status messages ──────────────────────────────────────────────────
    welcome: str  # "... {x_start} ... {x_goal} ... {o_start} ... {o_goal} ..."
    turn: str  # "Player {player}'s turn."
    prompt_move: str  # "{turn} Click your piece to move."
    prompt_obstacle: str  # "{turn} ... Obstacles left: {count}"
    click_own_piece: str
    piece_selected: str  # "Piece {player} selected on {square}. ..."
    moved: str  # "Player {player} moved from {from_sq} to {to_sq}."
    placed_obstacle: str  # "Player {player} placed an obstacle on {square}."
    wins: str  # "Player {player} wins the game!"

    # Rejections (one per Rejection member)
    reject_off_board: str
    reject_blocked: str
    reject_occupied_by_opponent: str
    reject_not_adjacent: str
    reject_no_obstacles_left: str
    reject_occupied: str
    reject_not_your_piece: str
    reject_game_over: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_move: str
    btn_obstacle: str
    btn_new_game: str

    # ── PlayerInfoPanel ──────────────────────────────────────────────────
    info_current_player: str
    info_obstacles_left: str  # "Obstacles left for {player}:"

    def rejection(self, reason: Rejection) -> str:
        """Display text for a rejection reason."""
        return getattr(self, f"reject_{reason.name.lower()}")


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Blockade",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    menu_language="&Language",
    welcome=(
        "Welcome! Player X starts on {x_start} and heads for {x_goal}. "
        "Player O starts on {o_start} and heads for {o_goal}. "
        "Player X to move."
    ),
    turn="Player {player}'s turn.",
    prompt_move="{turn} Click your piece to move.",
    prompt_obstacle=(
        "{turn} Click an empty square to place an obstacle. "
        "Obstacles left: {count}"
    ),
    click_own_piece="Click your piece to move.",
    piece_selected="Piece {player} selected on {square}. Now click the destination.",
    moved="✅ Player {player} moved from {from_sq} to {to_sq}.",
    placed_obstacle="✅ Player {player} placed an obstacle on {square}.",
    wins="🎉 Congratulations! Player {player} wins the game! 🎉",
    reject_off_board="❌ Invalid move: off the board.",
    reject_blocked="❌ Invalid move: the path is blocked by an obstacle.",
    reject_occupied_by_opponent="❌ Invalid move: the square holds the opponent's piece.",
    reject_not_adjacent="❌ Invalid move: only one square horizontally or vertically.",
    reject_no_obstacles_left="❌ You have no obstacles left to place.",
    reject_occupied="❌ Cannot place an obstacle on an occupied square.",
    reject_not_your_piece="❌ That is not your piece.",
    reject_game_over="The game is over.",
    btn_move="Move",
    btn_obstacle="Place obstacle",
    btn_new_game="New Game",
    info_current_player="Current player:",
    info_obstacles_left="Obstacles left for {player}:",
)

_PT = Strings(
    window_title="Blockade",
    menu_game="&Jogo",
    menu_new_game="&Novo jogo",
    menu_quit="&Sair",
    menu_language="&Idioma",
    welcome=(
        "Bem-vindo! Jogador X começa em {x_start} e busca {x_goal}. "
        "Jogador O começa em {o_start} e busca {o_goal}. "
        "É a vez do jogador X."
    ),
    turn="É a vez do jogador {player}.",
    prompt_move="{turn} Clique na sua peça para mover.",
    prompt_obstacle=(
        "{turn} Clique em um quadrado vazio para colocar um obstáculo. "
        "Obstáculos restantes: {count}"
    ),
    click_own_piece="Clique na sua peça para mover.",
    piece_selected="Peça {player} selecionada em {square}. Agora clique no destino.",
    moved="✅ Jogador {player} moveu de {from_sq} para {to_sq}.",
    placed_obstacle="✅ Jogador {player} colocou um obstáculo em {square}.",
    wins="🎉 Parabéns! O jogador {player} venceu o jogo! 🎉",
    reject_off_board="❌ Movimento inválido: Fora do tabuleiro.",
    reject_blocked="❌ Movimento inválido: Caminho bloqueado por um obstáculo.",
    reject_occupied_by_opponent=(
        "❌ Movimento inválido: O quadrado já está ocupado pela peça do oponente."
    ),
    reject_not_adjacent=(
        "❌ Movimento inválido: Apenas um quadrado na horizontal ou vertical."
    ),
    reject_no_obstacles_left="❌ Você não tem mais obstáculos para colocar.",
    reject_occupied="❌ Não é possível colocar obstáculo em um quadrado já ocupado.",
    reject_not_your_piece="❌ Essa não é a sua peça.",
    reject_game_over="O jogo terminou.",
    btn_move="Mover",
    btn_obstacle="Colocar obstáculo",
    btn_new_game="Novo jogo",
    info_current_player="Jogador atual:",
    info_obstacles_left="Obstáculos restantes para {player}:",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Portuguese": _PT,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
