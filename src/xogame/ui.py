"""FastAPI-powered web UI for playing XO in the browser."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from .game import EMPTY, XOGame

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Container for an active game and the lock guarding it."""

    game: XOGame
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(title="XO Game", description="Tic-tac-toe against a minimax bot")


class NewGameRequest(BaseModel):
    """Request payload for starting a new game."""

    model_config = ConfigDict(populate_by_name=True)

    bot_mode: bool = Field(
        default=True,
        alias="botMode",
        description="Let the computer play O",
    )


class MoveRequest(BaseModel):
    """Request payload for placing a mark on an existing game."""

    model_config = ConfigDict(populate_by_name=True)

    cell_index: int = Field(alias="cellIndex", ge=0, le=8)


def _create_session(bot_mode: bool) -> Tuple[str, GameSession]:
    session = GameSession(game=XOGame(bot_mode=bot_mode))
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    logger.info("Created game %s (bot mode: %s)", session_id, bot_mode)
    return session_id, session


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        game = session.game
        move_log: List[Dict[str, object]] = [
            {"player": player, "cellIndex": index} for player, index in game.move_log
        ]
        state: Dict[str, object] = {
            "id": game_id,
            "cells": [c if c != EMPTY else "" for c in game.cells],
            "currentPlayer": game.current_player,
            "winner": game.winner,
            "drawn": game.drawn,
            "botMode": game.bot_mode,
            "availableMoves": game.available_moves(),
            "moveLog": move_log,
        }
        if move_log:
            state["lastMove"] = move_log[-1]
        return state


@app.post("/api/game")
def create_game(request: NewGameRequest) -> Dict[str, object]:
    game_id, session = _create_session(request.bot_mode)
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        # Illegal placements are ignored; the client just redraws.
        session.game.play(request.cell_index)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/reset")
def reset_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.reset()
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/mode")
def toggle_mode(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.toggle_mode()
    return _serialize_session(game_id, session)


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return HTML_PAGE


HTML_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <title>XO Game</title>
    <style>
      :root {
        color-scheme: dark;
        font-family: system-ui, -apple-system, BlinkMacSystemFont, \"Segoe UI\", sans-serif;
      }
      body {
        margin: 0;
        min-height: 100vh;
        display: flex;
        justify-content: center;
        align-items: center;
        background: #111827;
        color: #f9fafb;
      }
      main {
        display: flex;
        flex-direction: column;
        align-items: center;
        gap: 1.25rem;
      }
      h1 {
        margin: 0 0 1rem;
        font-size: 1.9rem;
        font-weight: 700;
      }
      .board {
        display: grid;
        grid-template-columns: repeat(3, 5rem);
        gap: 2px;
        margin-bottom: 1rem;
      }
      .cell {
        width: 5rem;
        height: 5rem;
        border: 2px solid #4b5563;
        background: #1f2937;
        color: #f9fafb;
        font-size: 1.5rem;
        font-weight: 700;
        cursor: pointer;
      }
      .cell:hover {
        background: #374151;
      }
      .cell.o {
        color: #dc2626;
      }
      .status {
        min-height: 1.75rem;
        margin: 0;
        font-size: 1.25rem;
        font-weight: 700;
      }
      .control {
        padding: 0.5rem;
        border: none;
        border-radius: 0.25rem;
        color: #fff;
        cursor: pointer;
      }
      #reset {
        background: #1d4ed8;
      }
      #reset:hover {
        background: #2563eb;
      }
      #mode {
        background: #15803d;
      }
      #mode:hover {
        background: #16a34a;
      }
    </style>
  </head>
  <body>
    <main>
      <h1>XO Game</h1>
      <div class=\"board\" id=\"board\"></div>
      <p class=\"status\" id=\"status\"></p>
      <button class=\"control\" id=\"reset\" type=\"button\">Play Again</button>
      <button class=\"control\" id=\"mode\" type=\"button\"></button>
    </main>
    <script>
      const boardEl = document.getElementById(\"board\");
      const statusEl = document.getElementById(\"status\");
      const resetButton = document.getElementById(\"reset\");
      const modeButton = document.getElementById(\"mode\");
      let gameId = null;

      const cellButtons = Array.from({ length: 9 }, (_, index) => {
        const button = document.createElement(\"button\");
        button.type = \"button\";
        button.className = \"cell\";
        button.addEventListener(\"click\", () =>
          send(`/api/game/${gameId}/move`, { cellIndex: index })
        );
        boardEl.appendChild(button);
        return button;
      });

      function render(state) {
        gameId = state.id;
        state.cells.forEach((value, index) => {
          const button = cellButtons[index];
          button.textContent = value;
          button.classList.toggle(\"o\", value === \"O\");
        });
        if (state.winner) {
          statusEl.textContent = `${state.winner} wins`;
        } else if (state.drawn) {
          statusEl.textContent = \"Draw\";
        } else {
          statusEl.textContent = \"\";
        }
        modeButton.textContent = state.botMode ? \"Play with Player\" : \"Play with Bot\";
      }

      async function send(path, body) {
        const response = await fetch(path, {
          method: \"POST\",
          headers: { \"Content-Type\": \"application/json\" },
          body: body === undefined ? undefined : JSON.stringify(body),
        });
        if (!response.ok) {
          console.error(\"Request failed\", path, response.status);
          return;
        }
        render(await response.json());
      }

      resetButton.addEventListener(\"click\", () => send(`/api/game/${gameId}/reset`));
      modeButton.addEventListener(\"click\", () => send(`/api/game/${gameId}/mode`));

      send(\"/api/game\", { botMode: true });
    </script>
  </body>
</html>
"""
