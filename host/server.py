from __future__ import annotations

import asyncio
import json
import logging
import threading
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple

import websockets
from websockets.server import WebSocketServerProtocol

from engine.analysis import analyze_hand
from engine.cards import Card, cards_to_labels, find_duplicates, parse_label
from engine.equity import calculate_equity
from engine.evaluator import evaluate_hand, get_best_hand
from engine.models import EvaluatedHand, GameState, Position, SolverConfig
from engine.solver import solve_for_gto

LOGGER = logging.getLogger("solver_host")

VALID_BOARD_SIZES = (0, 3, 4, 5)
MAX_HAND_SIZE = 7

# SolverServer glues the engine to WebSocket clients (UI front-ends, scripts).
# Every network concern lives here; the engine stays pure and synchronous.


class SolverRequestError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


def _card_list(message: Dict[str, Any], key: str) -> List[Card]:
    raw = message.get(key) or []
    if not isinstance(raw, list) or not all(isinstance(label, str) for label in raw):
        raise SolverRequestError("BAD_SCHEMA", f"{key} must be a list of card labels")
    try:
        return [parse_label(label) for label in raw]
    except ValueError as exc:
        raise SolverRequestError("BAD_CARD", str(exc)) from exc


def _check_slots(*groups: List[Card]) -> None:
    duplicates = find_duplicates(*groups)
    if duplicates:
        raise SolverRequestError("DUPLICATE_CARD", f"Card used twice: {', '.join(cards_to_labels(duplicates))}")


def _check_board(board: List[Card]) -> None:
    if len(board) not in VALID_BOARD_SIZES:
        raise SolverRequestError("BAD_BOARD", "Board must have 0, 3, 4 or 5 cards")


def _amount(state: Dict[str, Any], key: str, default: float) -> float:
    value = state.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise SolverRequestError("BAD_SCHEMA", f"{key} must be a non-negative number")
    return value


class SolverServer:
    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = config or SolverConfig()
        # Polled by long equity runs between batches.
        self.shutdown = threading.Event()

    async def start(self, host: str = "0.0.0.0", port: int = 8765) -> None:
        try:
            async with websockets.serve(self._handle_connection, host, port, process_request=_process_request):
                LOGGER.info("Solver host listening on %s:%s", host, port)
                await asyncio.Future()
        finally:
            self.shutdown.set()

    async def _handle_connection(self, websocket: WebSocketServerProtocol) -> None:
        LOGGER.info("Client connected from %s", getattr(websocket, "remote_address", None))
        try:
            async for raw in websocket:
                response = await self.handle_raw(raw)
                await websocket.send(json.dumps(response))
        except websockets.ConnectionClosed:
            pass
        LOGGER.info("Client disconnected")

    async def handle_raw(self, raw: str) -> Dict[str, Any]:
        try:
            message = json.loads(raw)
        except (TypeError, ValueError):
            return _error_payload("BAD_JSON", "Message must be a JSON object")
        if not isinstance(message, dict):
            return _error_payload("BAD_JSON", "Message must be a JSON object")

        request_id = message.get("id")
        try:
            payload = await self.handle_message(message)
        except SolverRequestError as exc:
            payload = _error_payload(exc.code, exc.msg)
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("Request %r crashed: %s", message.get("type"), exc)
            payload = _error_payload("INTERNAL", "Internal error")
        if request_id is not None:
            payload["id"] = request_id
        return payload

    async def handle_message(self, message: Dict[str, Any]) -> Dict[str, Any]:
        msg_type = message.get("type")
        if msg_type == "evaluate":
            return await self._evaluate(message)
        if msg_type == "equity":
            return await self._equity(message)
        if msg_type == "solve":
            return await self._solve(message)
        if msg_type == "analyze":
            return await self._analyze(message)
        raise SolverRequestError("UNKNOWN_TYPE", f"Unsupported message type: {msg_type!r}")

    def iterations_for(self, raw: Any, default: int) -> int:
        if raw is None:
            raw = default
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise SolverRequestError("BAD_SCHEMA", "iterations must be an integer")
        return max(self.config.min_iterations, min(raw, self.config.max_iterations))

    # Handlers ----------------------------------------------------------

    async def _evaluate(self, message: Dict[str, Any]) -> Dict[str, Any]:
        cards = _card_list(message, "cards")
        if len(cards) > MAX_HAND_SIZE:
            raise SolverRequestError("BAD_SCHEMA", f"cards must hold at most {MAX_HAND_SIZE} cards")
        _check_slots(cards)
        hand, best = await asyncio.to_thread(_evaluate_with_best, cards)
        return {
            "v": 1,
            "type": "evaluate_result",
            "score": hand.score,
            "name": hand.name,
            "category": hand.category.name if hand.category is not None else None,
            "best_hand": cards_to_labels(best),
        }

    async def _equity(self, message: Dict[str, Any]) -> Dict[str, Any]:
        player = _card_list(message, "player")
        opponent = _card_list(message, "opponent")
        board = _card_list(message, "board")
        _check_board(board)
        _check_slots(player, opponent, board)
        iterations = self.iterations_for(message.get("iterations"), self.config.default_equity_iterations)

        result = await asyncio.to_thread(
            calculate_equity,
            player,
            opponent,
            board,
            iterations,
            batch_size=self.config.batch_size,
            should_stop=self.shutdown.is_set,
        )
        return {
            "v": 1,
            "type": "equity_result",
            "player_equity": result.player_equity,
            "opponent_equity": result.opponent_equity,
            "tie_equity": result.tie_equity,
            "iterations": result.iterations,
        }

    async def _solve(self, message: Dict[str, Any]) -> Dict[str, Any]:
        state = message.get("state")
        if not isinstance(state, dict):
            raise SolverRequestError("BAD_SCHEMA", "state object required")
        player = _card_list(state, "player")
        board = _card_list(state, "board")
        _check_board(board)
        _check_slots(player, board)
        try:
            position = Position(state.get("position", Position.BTN.value))
        except ValueError as exc:
            raise SolverRequestError("BAD_SCHEMA", f"Unknown position: {state.get('position')!r}") from exc
        preflop = state.get("preflop", len(board) == 0)
        if not isinstance(preflop, bool):
            raise SolverRequestError("BAD_SCHEMA", "preflop must be true or false")
        game_state = GameState(
            player_cards=player,
            community_cards=board,
            position=position,
            pot_size=_amount(state, "pot", 100),
            bet_size=_amount(state, "bet", 75),
            stack_size=_amount(state, "stack", 1_000),
            is_preflop=preflop,
        )
        iterations = self.iterations_for(message.get("iterations"), self.config.default_solver_iterations)

        recommendations = await asyncio.to_thread(solve_for_gto, game_state, iterations)
        return {
            "v": 1,
            "type": "solve_result",
            "recommendations": [
                {"action": rec.action.value, "frequency": rec.frequency, "ev": rec.ev}
                for rec in recommendations
            ],
        }

    async def _analyze(self, message: Dict[str, Any]) -> Dict[str, Any]:
        player = _card_list(message, "player")
        board = _card_list(message, "board")
        _check_board(board)
        _check_slots(player, board)
        equity = message.get("equity")
        if equity is not None and (isinstance(equity, bool) or not isinstance(equity, (int, float))):
            raise SolverRequestError("BAD_SCHEMA", "equity must be a number")

        analysis = await asyncio.to_thread(analyze_hand, player, board, equity)
        if analysis is None:
            return {"v": 1, "type": "analyze_result", "analysis": None}
        return {
            "v": 1,
            "type": "analyze_result",
            "analysis": {
                "notation": analysis.notation,
                "shape": analysis.shape,
                "tier": analysis.tier,
                "stage": analysis.stage,
                "strength": analysis.strength,
                "strength_label": analysis.strength_label,
                "advice": analysis.advice,
            },
        }


def _evaluate_with_best(cards: List[Card]) -> Tuple[EvaluatedHand, List[Card]]:
    return evaluate_hand(cards), get_best_hand(cards)


def _error_payload(code: str, msg: str) -> Dict[str, Any]:
    return {"v": 1, "type": "error", "code": code, "msg": msg}


async def _process_request(path, request_headers):
    """Return a simple HTTP response for health checks."""

    upgrade_header = request_headers.get("Upgrade", "").lower()
    if upgrade_header == "websocket":
        return None  # let the WebSocket handshake continue

    if path in {"/", "/health", "/healthz"}:
        body = b"solver host running\n"
        status = HTTPStatus.OK
    else:
        body = b"not found\n"
        status = HTTPStatus.NOT_FOUND
    headers = [
        ("Content-Type", "text/plain; charset=utf-8"),
        ("Content-Length", str(len(body))),
    ]
    return status, headers, body
