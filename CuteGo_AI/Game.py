"""Game session and turn loop for Go and Gomoku."""

from .Board import Board, BLACK, WHITE, EMPTY, GO, GOMOKU, RULE_SETS, color_from_name
from .Player import PASS, RESIGN, UNDO
from .ai import agent, backend
from .ai.difficulty import MEDIUM
from .engine import referee, rules
from .engine.history import HistoryEntry
from .engine.scoring import KOMI, calculate_score, calculate_win_rate
from .serialization.sgf import generate_sgf, parse_sgf
from .serialization.snapshot import serialize_game, deserialize_game
from .utils.logger import log_event

DRAW = EMPTY
NAMES = {BLACK: "Black", WHITE: "White"}
SHORT = {BLACK: "B", WHITE: "W"}


class GameState:
    """
    Mutable session around the pure rules engine: board, side to move,
    captures, pass streak, history (for undo, ko and SGF) and the result.
    winner is None while the game runs, then BLACK, WHITE or DRAW.
    """

    def __init__(self, size=9, rule_set=GO, komi=KOMI, difficulty=MEDIUM, logger=log_event):
        if rule_set not in RULE_SETS:
            raise ValueError(f"Unsupported rule set: {rule_set}")
        self.komi = komi
        self.difficulty = difficulty
        self.logger = logger
        self.local_color = None
        self.black_name = NAMES[BLACK]
        self.white_name = NAMES[WHITE]
        self.backend_win_rate = None
        self.reset(size, rule_set)

    def reset(self, size=None, rule_set=None):
        self.size = size or self.size
        self.rule_set = rule_set or self.rule_set
        self.board = Board(self.size)
        self.current_player = BLACK
        self.captures = {BLACK: 0, WHITE: 0}
        self.last_move = None
        self.consecutive_passes = 0
        self.history = []
        self.initial_stones = []
        self.first_player = BLACK
        self.base_captures = {BLACK: 0, WHITE: 0}
        self.game_over = False
        self.winner = None
        self.win_reason = ""

    @property
    def previous_fingerprint(self):
        """Fingerprint of the board before the last action (simple ko)."""
        if not self.history:
            return None
        return self.history[-1].board.fingerprint()

    @property
    def move_count(self):
        return len(self.history)

    def _record(self, before, move):
        self.history.append(HistoryEntry(
            board=before,
            next_player=self.current_player,
            black_captures=self.captures[BLACK],
            white_captures=self.captures[WHITE],
            last_move=move,
            consecutive_passes=self.consecutive_passes,
        ))

    def _finish(self, winner, reason):
        self.game_over = True
        self.winner = winner
        self.win_reason = reason
        if winner == DRAW:
            self.logger(f"Result: Draw ({reason})")
        else:
            self.logger(f"Winner: {NAMES[winner]} ({reason})")

    def finish_by_score(self):
        score = self.score()
        if score["black"] > score["white"]:
            winner = BLACK
        elif score["white"] > score["black"]:
            winner = WHITE
        else:
            winner = DRAW
        self._finish(winner, f"B {score['black']} : W {score['white']}")

    def play(self, x, y):
        """Play for the side to move. Returns True if the move was accepted."""
        color = self.current_player
        if self.game_over:
            self.logger(f"Rejected {SHORT[color]} {(x, y)}: game is over")
            return False
        move = (x, y)
        result = referee.check_move(move, self.board, color, self.rule_set, self.previous_fingerprint)
        if result is None:
            reason = referee.rejection_reason(move, self.board, color, self.rule_set, self.previous_fingerprint)
            self.logger(f"Rejected {SHORT[color]} {move}: {reason}")
            return False

        before = self.board
        self.board = result.board
        self.captures[color] += result.captured
        self.last_move = move
        self.consecutive_passes = 0
        self.current_player = -color
        self._record(before, move)

        note = f" captures {result.captured}" if result.captured else ""
        self.logger(f"Move {self.move_count}: {SHORT[color]} {move}{note}")

        if self.rule_set == GOMOKU:
            if rules.check_win(self.board, move):
                self._finish(color, "five in a row")
            elif not self.board.empty_points():
                self._finish(DRAW, "board full")
        return True

    def pass_turn(self):
        """Pass for the side to move; a second consecutive pass ends the game."""
        if self.game_over:
            return False
        color = self.current_player
        before = self.board
        self.consecutive_passes += 1
        self.last_move = None
        self.current_player = -color
        self._record(before, None)
        self.logger(f"Move {self.move_count}: {SHORT[color]} pass")

        if self.consecutive_passes >= 2:
            if self.rule_set == GO:
                self.finish_by_score()
            else:
                self._finish(DRAW, "both players passed")
        return True

    def resign(self, color=None):
        if self.game_over:
            return False
        color = self.current_player if color is None else color
        self.logger(f"{NAMES[color]} resigns")
        self._finish(-color, "resignation")
        return True

    def undo(self, steps=1):
        """Take back the last `steps` actions (moves or passes)."""
        steps = min(steps, len(self.history))
        if steps <= 0:
            return False
        for _ in range(steps):
            entry = self.history.pop()
            self.board = entry.board
            self.current_player = entry.mover
            if self.history:
                prev = self.history[-1]
                self.captures = {BLACK: prev.black_captures, WHITE: prev.white_captures}
                self.last_move = prev.last_move
                self.consecutive_passes = prev.consecutive_passes
            else:
                self.captures = dict(self.base_captures)
                self.last_move = None
                self.consecutive_passes = 0
        self.game_over = False
        self.winner = None
        self.win_reason = ""
        self.logger(f"Undo {steps} action(s); {NAMES[self.current_player]} to move")
        return True

    def add_setup_stone(self, x, y, color):
        """Handicap/setup stone; only allowed before the first move."""
        if self.history:
            raise ValueError("setup stones must be placed before the first move")
        self.board.place(x, y, color)
        self.initial_stones.append((x, y, color))

    def apply_remote(self, event):
        """
        Apply a peer event: {'type': 'MOVE', 'x', 'y'}, {'type': 'PASS'},
        {'type': 'SYNC', 'boardSize', 'gameType', 'startColor'} or {'type': 'RESTART'}.
        Returns True if the event changed the game.
        """
        kind = event.get("type") if isinstance(event, dict) else None
        if kind == "MOVE":
            return self.play(event.get("x"), event.get("y"))
        if kind == "PASS":
            return self.pass_turn()
        if kind == "SYNC":
            size = event.get("boardSize")
            rule_set = event.get("gameType", event.get("ruleSet"))
            color = color_from_name(event.get("startColor"))
            if not isinstance(size, int) or isinstance(size, bool) or size < 2 or rule_set not in RULE_SETS:
                self.logger(f"Ignored malformed SYNC: {event}")
                return False
            self.reset(size, rule_set)
            self.local_color = color
            self.logger(f"Synced: {size}x{size} {rule_set}")
            return True
        if kind == "RESTART":
            self.reset()
            self.logger("Game restarted by peer")
            return True
        self.logger(f"Ignored remote event {kind!r}")
        return False

    def ai_move(self, difficulty=None, **options):
        """Let the AI act for the side to move; returns the AI's outcome."""
        if self.game_over:
            return None
        options.setdefault("komi", self.komi)
        outcome = agent.get_ai_move(
            self.board,
            self.current_player,
            self.rule_set,
            difficulty or self.difficulty,
            self.previous_fingerprint,
            **options,
        )
        if outcome == agent.RESIGN:
            self.resign()
        elif outcome is None:
            self.pass_turn()
        else:
            self.play(*outcome)
        return outcome

    def apply_backend_response(self, response):
        """Apply a neural backend answer through the same validation as any other move."""
        if response is None or self.game_over:
            return False
        self.backend_win_rate = response.win_rate
        if response.resign:
            return self.resign()
        if response.move is None:
            return self.pass_turn()
        return self.play(*response.move)

    def backend_request(self, difficulty=None, custom_visits=None, rank_table=None):
        """Request for the neural backend; its answer goes to apply_backend_response."""
        return backend.build_request(self, difficulty or self.difficulty, custom_visits, rank_table)

    def score(self):
        return calculate_score(self.board, self.komi)

    def win_rate(self):
        return calculate_win_rate(self.board, self.komi)

    def to_snapshot(self):
        return serialize_game(self.board, self.current_player, self.rule_set,
                              self.captures[BLACK], self.captures[WHITE])

    @classmethod
    def from_snapshot(cls, text, komi=KOMI, logger=log_event):
        snap = deserialize_game(text)
        if snap is None:
            return None
        game = cls(snap.size, snap.rule_set, komi=komi, logger=logger)
        game.board = snap.board
        game.current_player = snap.current_player
        game.captures = {BLACK: snap.black_captures, WHITE: snap.white_captures}
        # stones on the restored board become setup stones of the game record
        game.initial_stones = list(snap.board.stones())
        game.first_player = snap.current_player
        game.base_captures = dict(game.captures)
        return game

    def to_sgf(self, date=None):
        return generate_sgf(
            self.history,
            self.size,
            komi=self.komi,
            initial_stones=self.initial_stones,
            first_player=self.first_player,
            rule_set=self.rule_set,
            black_name=self.black_name,
            white_name=self.white_name,
            date=date,
        )

    @classmethod
    def from_sgf(cls, text, logger=log_event):
        record = parse_sgf(text)
        if record is None:
            return None
        game = cls(record.size, record.rule_set, komi=record.komi, logger=logger)
        game.board = record.board
        game.current_player = record.current_player
        game.captures = {BLACK: record.black_captures, WHITE: record.white_captures}
        game.last_move = record.last_move
        game.consecutive_passes = record.consecutive_passes
        game.history = list(record.history)
        game.initial_stones = list(record.initial_stones)
        game.first_player = record.history[0].mover if record.history else record.current_player
        game.black_name = record.black_name or NAMES[BLACK]
        game.white_name = record.white_name or NAMES[WHITE]
        logger(f"Imported SGF: {record.size}x{record.size} {record.rule_set}, {len(record.history)} moves")

        if game.rule_set == GOMOKU and game.last_move is not None and rules.check_win(game.board, game.last_move):
            game._finish(-game.current_player, "five in a row")
        elif game.consecutive_passes >= 2:
            if game.rule_set == GO:
                game.finish_by_score()
            else:
                game._finish(DRAW, "both players passed")
        return game


def play_match(black_player, white_player, game=None, renderer=None, logger=log_event, max_moves=None):
    """
    Run a game between two players until it ends. Returns BLACK, WHITE or DRAW.
    An AI that produces an illegal move forfeits; humans are asked again.
    """
    game = game or GameState(logger=logger)
    players = {BLACK: black_player, WHITE: white_player}

    while not game.game_over:
        if renderer:
            renderer(game)
        if max_moves is not None and game.move_count >= max_moves:
            if game.rule_set == GO:
                game.finish_by_score()
            else:
                game._finish(DRAW, "move limit reached")
            break

        color = game.current_player
        player = players[color]
        action = player.next_move(game)

        if action == RESIGN:
            game.resign(color)
        elif action == PASS:
            game.pass_turn()
        elif action == UNDO:
            # against an AI its reply is taken back too
            steps = 1 if players[-color].is_human else 2
            if not game.undo(steps):
                logger("Nothing to undo")
        elif not game.play(*action):
            if not player.is_human:
                logger(f"Disqualification: {NAMES[color]} - illegal move {action}")
                game._finish(-color, "illegal move")

    if renderer:
        renderer(game)
    return game.winner
