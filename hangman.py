from __future__ import annotations

import logging
import os

import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from gallows.core.engine import new_game, submit_guess
from gallows.core.guesser import AutoGuesser
from gallows.core.render import gallows_art, spaced_mask
from gallows.core.sources import AutoGuessSource
from gallows.core.state import GameState, GuessResult, InvalidWordError
from gallows.core.wordlist import load_wordlist, pick_local_word

# --- Generative AI services ---
from gallows.services.hints import llm_hint
from gallows.services.llm_picker import pick_with_llm

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("gallows.app")

MODES = ("Play yourself", "Watch the computer")
WORD_SOURCES = ("Random word", "Enter your own word")
MAX_AUTO_MOVES = 200


# =======================================
# Session-state helpers & game management
# =======================================

def _init_stats() -> None:
    """Ensure a stats dict exists in session state."""
    st.session_state.setdefault("stats", {"games": 0, "wins": 0, "losses": 0})


def _reset_round_state() -> None:
    st.session_state["round_counted"] = False
    st.session_state["history"] = []
    st.session_state["ai_hint"] = None
    st.session_state["coach_suggestion"] = None


def _random_word() -> tuple[str, str]:
    """Prefer an LLM-picked word; fall back to the local vocabulary."""
    llm_word = pick_with_llm()
    if llm_word:
        return llm_word, "llm"
    return pick_local_word(), "local"


def _start_new_game(custom_word: str | None = None) -> bool:
    """
    Start a new round and a fresh computer guesser.

    Returns False (and shows an error) when a custom word is blank.
    """
    if custom_word is None:
        word, source = _random_word()
    else:
        word, source = custom_word, "custom"

    try:
        st.session_state["game"] = new_game(word)
    except InvalidWordError as exc:
        st.error(f"Cannot start the round: {exc}")
        return False

    guesser = AutoGuesser(load_wordlist())
    st.session_state["auto_source"] = AutoGuessSource(guesser)
    st.session_state["word_source"] = source
    _reset_round_state()
    return True


def _ensure_game() -> GameState:
    """Ensure there is a GameState in session state; create one if missing."""
    if not isinstance(st.session_state.get("game"), GameState):
        _start_new_game()
    _init_stats()
    st.session_state.setdefault("word_source", "unknown")
    st.session_state.setdefault("history", [])
    st.session_state.setdefault("round_counted", False)
    return st.session_state["game"]


def _apply(game: GameState, raw: str) -> None:
    """Apply a raw guess, record it, and let the computer guesser observe the result."""
    if game.finished:
        return
    move = submit_guess(game, raw)
    if move is None:
        return
    st.session_state["history"].append(move)
    st.session_state["auto_source"].observe(game.snapshot())
    if move.outcome is GuessResult.REPEAT:
        st.session_state["notice"] = f"'{move.guess.upper()}' was already guessed."


def _computer_move(game: GameState) -> None:
    source: AutoGuessSource = st.session_state["auto_source"]
    _apply(game, source.next_guess(game.snapshot()))


def _coach_letter(game: GameState) -> str:
    """Ask a throwaway computer guesser, primed with the current board, for its next guess."""
    source = AutoGuessSource(AutoGuesser(load_wordlist()))
    view = game.snapshot()
    source.observe(view)
    return source.next_guess(view)


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Gallows", page_icon="🪢", layout="centered")
    st.title("🪢 Gallows")

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Settings")
        mode = st.radio("Mode", MODES, index=0)
        word_source = st.radio("Target word", WORD_SOURCES, index=0)
        custom_word = None
        if word_source == WORD_SOURCES[1]:
            custom_word = st.text_input("Word to guess", type="password")

        if st.button("🔁 New Game", use_container_width=True):
            if _start_new_game(custom_word):
                st.rerun()

        _init_stats()
        with st.expander("📊 Stats", expanded=True):
            s = st.session_state["stats"]
            games = s["games"]
            winrate = (s["wins"] / games * 100.0) if games else 0.0
            st.metric("Games", games)
            c1, c2 = st.columns(2); c1.metric("Wins", s["wins"]); c2.metric("Losses", s["losses"])
            st.metric("Win rate", f"{winrate:.1f}%")
            if st.button("♻️ Reset stats"):
                st.session_state["stats"] = {"games": 0, "wins": 0, "losses": 0}
                st.success("Stats reset.")

        with st.expander("Debug (env)"):
            st.write("OFFLINE_MODE:", os.getenv("OFFLINE_MODE"))
            st.write("Has OPENAI_API_KEY:", bool(os.getenv("OPENAI_API_KEY")))
            st.write("MODEL_NAME:", os.getenv("MODEL_NAME"))
            st.write("Word source:", st.session_state.get("word_source", "unknown"))

    game: GameState = _ensure_game()

    # ---- Board ----
    st.subheader("Board")
    st.code(gallows_art(game.lives_remaining) or " ", language=None)
    st.markdown(f"**Word**: `{spaced_mask(game.mask)}`")
    st.caption(f"Lives remaining: {game.lives_remaining}")
    guessed = ", ".join(game.guessed_letters) or "(none)"
    st.caption(f"Guessed letters: {guessed}")

    # ---- Moves ----
    if mode == MODES[0]:
        with st.expander("Need a hint or coaching?"):
            c1, c2 = st.columns(2)
            with c1:
                if st.button("✨ Generate Hint"):
                    with st.spinner("Thinking..."):
                        st.session_state["ai_hint"] = llm_hint(game.target, game.mask)
            with c2:
                if st.button("🤖 Coach: Next Guess", disabled=game.finished):
                    st.session_state["coach_suggestion"] = _coach_letter(game)
            st.info(st.session_state.get("ai_hint") or "No hint yet.")
            coach = st.session_state.get("coach_suggestion")
            if coach:
                st.success(f"The computer would try: **{coach.upper()}**")

        st.subheader("Your move")
        with st.form("guess_form", clear_on_submit=True):
            guess_inp = st.text_input(
                "Enter a single letter or guess the full word:",
                max_chars=32,
                help="A wrong letter or a wrong whole word costs one life; repeated letters are free.",
            )
            if st.form_submit_button("Submit") and not game.finished:
                _apply(game, guess_inp)
                st.rerun()
    else:
        st.subheader("Computer's move")
        c1, c2 = st.columns(2)
        with c1:
            if st.button("▶️ Next move", disabled=game.finished):
                _computer_move(game)
                st.rerun()
        with c2:
            if st.button("⏩ Play to the end", disabled=game.finished):
                for _ in range(MAX_AUTO_MOVES):
                    if game.finished:
                        break
                    _computer_move(game)
                st.rerun()

    notice = st.session_state.pop("notice", None)
    if notice:
        st.warning(notice)

    history = st.session_state.get("history", [])
    if history:
        with st.expander("Moves", expanded=False):
            for i, m in enumerate(history, start=1):
                st.text(f"{i:>2}) {m.kind:<6} {m.guess:<14} {m.outcome.value:<6} "
                        f"{spaced_mask(m.mask)}  lives={m.lives_remaining}")

    # ---- Outcome banner + stats update ----
    if game.finished and not st.session_state.get("round_counted", False):
        st.session_state["stats"]["games"] += 1
        st.session_state["stats"]["wins" if game.won else "losses"] += 1
        st.session_state["round_counted"] = True
        logger.info("Round finished: %s", "won" if game.won else "lost")

    if game.won:
        st.success(f"🎉 Solved! The word was **{game.target}**.")
    elif game.over:
        st.error(f"💀 No lives left. The word was: **{game.target}**")

    if game.finished:
        if custom_word is None:
            st.button("Play again", on_click=_start_new_game)
        else:
            st.caption("Enter a new word in the sidebar and press New Game to play again.")


if __name__ == "__main__":
    main()
