"""Tests for MoveValidator — per-piece legality, attacks and check."""

from glinski.core.board import Board
from glinski.core.enums import Color, PieceType
from glinski.core.move_validator import MoveValidator
from glinski.core.piece import Piece
from glinski.core.types import ALL_CELLS, CENTER, Cell

WHITE_KING_CORNER = Cell(-5, 5, 0)
BLACK_KING_CORNER = Cell(5, -5, 0)


def _board(*pieces: Piece, side: Color = Color.WHITE) -> Board:
    """Both kings in opposite corners plus *pieces*."""
    kings = [
        Piece(PieceType.KING, Color.WHITE, WHITE_KING_CORNER),
        Piece(PieceType.KING, Color.BLACK, BLACK_KING_CORNER),
    ]
    return Board([*kings, *pieces], side)


def _w(pt: PieceType, q: int, r: int, s: int) -> Piece:
    return Piece(pt, Color.WHITE, Cell(q, r, s))


def _b(pt: PieceType, q: int, r: int, s: int) -> Piece:
    return Piece(pt, Color.BLACK, Cell(q, r, s))


class TestBasicRules:
    def test_none_piece(self) -> None:
        assert not MoveValidator(Board.initial()).is_valid_move(None, CENTER)

    def test_wrong_side_to_move(self) -> None:
        board = Board.initial()
        black_pawn = board.piece_at(Cell(0, -1, 1))
        assert not MoveValidator(board).is_valid_move(black_pawn, CENTER)

    def test_black_pawn_after_white_moves(self) -> None:
        board = Board.initial()
        board.move_piece(board.piece_at(Cell(0, 1, -1)), Cell(0, 0, 0))
        validator = MoveValidator(board)
        blocked = board.piece_at(Cell(0, -1, 1))
        free = board.piece_at(Cell(1, -2, 1))
        assert validator.valid_destinations(blocked) == []
        assert validator.valid_destinations(free) == [Cell(1, -1, 0)]

    def test_captured_piece_cannot_move(self) -> None:
        rook = _w(PieceType.ROOK, 0, 0, 0)
        board = _board(rook)
        rook.capture()
        assert not MoveValidator(board).is_valid_move(rook, Cell(0, -1, 1))

    def test_off_board_destination(self) -> None:
        rook = _w(PieceType.ROOK, 0, -5, 5)
        assert not MoveValidator(_board(rook)).is_valid_move(rook, Cell(0, -6, 6))

    def test_validation_does_not_mutate(self) -> None:
        board = Board.initial()
        before = [p.snapshot() for p in board.all_pieces()]
        MoveValidator(board).legal_moves(Color.WHITE)
        assert [p.snapshot() for p in board.all_pieces()] == before
        assert board.side_to_move == Color.WHITE


class TestPawn:
    def test_single_step_from_inner_rank(self) -> None:
        board = Board.initial()
        pawn = board.piece_at(Cell(0, 1, -1))
        assert MoveValidator(board).valid_destinations(pawn) == [Cell(0, 0, 0)]

    def test_double_step_from_start_rank(self) -> None:
        board = Board.initial()
        pawn = board.piece_at(Cell(-4, 5, -1))
        assert MoveValidator(board).valid_destinations(pawn) == [
            Cell(-4, 3, 1),
            Cell(-4, 4, 0),
        ]

    def test_double_step_needs_empty_landing(self) -> None:
        pawn = _w(PieceType.PAWN, -4, 5, -1)
        board = _board(pawn, _b(PieceType.PAWN, -4, 3, 1))
        assert MoveValidator(board).valid_destinations(pawn) == [Cell(-4, 4, 0)]

    def test_no_double_step_after_moving(self) -> None:
        pawn = _w(PieceType.PAWN, -4, 5, -1)
        pawn.position = Cell(-4, 5, -1)
        board = _board(pawn)
        assert MoveValidator(board).valid_destinations(pawn) == [Cell(-4, 4, 0)]

    def test_captures_diagonally_only(self) -> None:
        pawn = _w(PieceType.PAWN, 0, 0, 0)
        board = _board(
            pawn,
            _b(PieceType.KNIGHT, 1, -1, 0),
            _b(PieceType.KNIGHT, 0, -1, 1),
        )
        assert MoveValidator(board).valid_destinations(pawn) == [Cell(1, -1, 0)]

    def test_no_capture_onto_empty_cell(self) -> None:
        pawn = _w(PieceType.PAWN, 0, 0, 0)
        board = _board(pawn)
        validator = MoveValidator(board)
        assert not validator.is_valid_move(pawn, Cell(1, -1, 0))
        assert not validator.is_valid_move(pawn, Cell(-1, 0, 1))


class TestSliders:
    def test_rook_blocked_by_pieces(self) -> None:
        rook = _w(PieceType.ROOK, 0, 0, 0)
        board = _board(
            rook,
            _w(PieceType.PAWN, 1, 0, -1),
            _b(PieceType.PAWN, 2, 0, -2),
        )
        validator = MoveValidator(board)
        assert not validator.is_valid_move(rook, Cell(1, 0, -1))
        assert not validator.is_valid_move(rook, Cell(2, 0, -2))
        assert not validator.is_valid_move(rook, Cell(3, 0, -3))
        assert validator.is_valid_move(rook, Cell(0, 1, -1))

    def test_rook_captures_first_enemy(self) -> None:
        rook = _w(PieceType.ROOK, 0, 0, 0)
        board = _board(rook, _b(PieceType.PAWN, 0, -3, 3))
        validator = MoveValidator(board)
        assert validator.is_valid_move(rook, Cell(0, -3, 3))
        assert not validator.is_valid_move(rook, Cell(0, -4, 4))

    def test_rook_rejects_off_line(self) -> None:
        rook = _w(PieceType.ROOK, 0, 0, 0)
        assert not MoveValidator(_board(rook)).is_valid_move(rook, Cell(2, -1, -1))

    def test_queen_from_center(self) -> None:
        queen = _w(PieceType.QUEEN, 0, 0, 0)
        # Own king blocks one rook-ray cell; the enemy king may be taken.
        assert len(MoveValidator(_board(queen)).valid_destinations(queen)) == 29

    def test_bishop_lands_on_its_color_class(self) -> None:
        bishop = _w(PieceType.BISHOP, -4, 2, 2)
        validator = MoveValidator(_board(bishop))
        assert validator.is_valid_move(bishop, Cell(2, -1, -1))
        assert not validator.is_valid_move(bishop, Cell(-2, 1, 1))
        assert not validator.is_valid_move(bishop, Cell(0, 0, 0))

    def test_bishop_never_leaves_its_color_class(self) -> None:
        blockers = (
            _w(PieceType.PAWN, 1, 1, -2),
            _w(PieceType.PAWN, -2, 0, 2),
            _b(PieceType.PAWN, 2, -3, 1),
            _b(PieceType.PAWN, -1, -1, 2),
        )
        occupied = {WHITE_KING_CORNER, BLACK_KING_CORNER}
        occupied.update(p.position for p in blockers)

        origins_with_moves = 0
        for origin in ALL_CELLS:
            if origin in occupied:
                continue
            bishop = Piece(PieceType.BISHOP, Color.WHITE, origin)
            board = _board(*(p.clone() for p in blockers), bishop)
            destinations = MoveValidator(board).valid_destinations(bishop)
            if destinations:
                origins_with_moves += 1
            assert all(c.color_class == origin.color_class for c in destinations), origin
        assert origins_with_moves > 0

    def test_bishop_in_center_is_stuck(self) -> None:
        bishop = _w(PieceType.BISHOP, 0, 0, 0)
        assert MoveValidator(_board(bishop)).valid_destinations(bishop) == []


class TestKnight:
    def test_reaches_whole_distance_two_ring(self) -> None:
        knight = _w(PieceType.KNIGHT, 0, 0, 0)
        dests = MoveValidator(_board(knight)).valid_destinations(knight)
        assert len(dests) == 12
        assert all(CENTER.distance_to(c) == 2 for c in dests)

    def test_leaps_over_neighbours(self) -> None:
        knight = _w(PieceType.KNIGHT, 0, 0, 0)
        ring = [
            _w(PieceType.PAWN, q, r, s)
            for q, r, s in (
                (1, 0, -1), (1, -1, 0), (0, -1, 1), (-1, 0, 1), (-1, 1, 0), (0, 1, -1),
            )
        ]
        board = _board(knight, *ring)
        assert MoveValidator(board).is_valid_move(knight, Cell(2, -1, -1))

    def test_initial_knight(self) -> None:
        board = Board.initial()
        knight = board.piece_at(Cell(2, 3, -5))
        assert MoveValidator(board).valid_destinations(knight) == [Cell(1, 2, -3)]


class TestKing:
    def test_avoids_attacked_cells(self) -> None:
        king = _w(PieceType.KING, 0, 0, 0)
        board = Board(
            [king, _b(PieceType.ROOK, 5, -1, -4), _b(PieceType.KING, 5, -5, 0)]
        )
        dests = MoveValidator(board).valid_destinations(king)
        assert set(dests) == {
            Cell(1, 0, -1),
            Cell(-1, 0, 1),
            Cell(-1, 1, 0),
            Cell(0, 1, -1),
        }

    def test_keeps_away_from_enemy_king(self) -> None:
        king = _w(PieceType.KING, 0, 0, 0)
        board = Board([king, _b(PieceType.KING, 2, -1, -1)])
        validator = MoveValidator(board)
        assert not validator.is_valid_move(king, Cell(1, 0, -1))
        assert not validator.is_valid_move(king, Cell(1, -1, 0))
        assert validator.is_valid_move(king, Cell(0, -1, 1))

    def test_single_step_only(self) -> None:
        king = _w(PieceType.KING, 0, 0, 0)
        board = Board([king, _b(PieceType.KING, 5, -5, 0)])
        assert not MoveValidator(board).is_valid_move(king, Cell(0, -2, 2))


class TestSelfCheck:
    def _pinned(self) -> tuple[Board, Piece]:
        rook = _w(PieceType.ROOK, 0, 1, -1)
        board = Board(
            [
                _w(PieceType.KING, 0, 3, -3),
                rook,
                _b(PieceType.ROOK, 0, -3, 3),
                _b(PieceType.KING, 5, -5, 0),
            ]
        )
        return board, rook

    def test_pinned_piece_cannot_leave_line(self) -> None:
        board, rook = self._pinned()
        assert not MoveValidator(board).is_valid_move(rook, Cell(1, 1, -2))

    def test_pinned_piece_may_slide_along_line(self) -> None:
        board, rook = self._pinned()
        validator = MoveValidator(board)
        assert validator.is_valid_move(rook, Cell(0, 0, 0))
        assert validator.is_valid_move(rook, Cell(0, -3, 3))

    def test_screening_leaves_board_untouched(self) -> None:
        board, rook = self._pinned()
        MoveValidator(board).valid_destinations(rook)
        assert rook.position == Cell(0, 1, -1)
        assert not rook.has_moved


class TestCheckDetection:
    def test_rook_gives_check(self) -> None:
        board = Board(
            [
                _w(PieceType.KING, 0, 3, -3),
                _b(PieceType.ROOK, 0, -3, 3),
                _b(PieceType.KING, 5, -5, 0),
            ]
        )
        assert MoveValidator(board).is_king_in_check(Color.WHITE)
        assert not MoveValidator(board).is_king_in_check(Color.BLACK)

    def test_blocked_check(self) -> None:
        board = Board(
            [
                _w(PieceType.KING, 0, 3, -3),
                _w(PieceType.KNIGHT, 0, 0, 0),
                _b(PieceType.ROOK, 0, -3, 3),
                _b(PieceType.KING, 5, -5, 0),
            ]
        )
        assert not MoveValidator(board).is_king_in_check(Color.WHITE)

    def test_pawn_attacks_occupied_cell(self) -> None:
        board = _board(_b(PieceType.PAWN, 0, 0, 0), _w(PieceType.ROOK, 1, 0, -1))
        assert MoveValidator(board).is_square_under_attack(Cell(1, 0, -1), Color.WHITE)

    def test_missing_king_is_never_in_check(self) -> None:
        board = Board([_w(PieceType.ROOK, 0, 0, 0), _b(PieceType.KING, 5, -5, 0)])
        validator = MoveValidator(board)
        assert not validator.is_king_in_check(Color.WHITE)
        assert validator.has_legal_moves(Color.WHITE)

    def test_initial_position_quiet(self) -> None:
        validator = MoveValidator(Board.initial())
        assert not validator.is_king_in_check(Color.WHITE)
        assert not validator.is_king_in_check(Color.BLACK)


class TestMoveEnumeration:
    def test_both_sides_have_moves_initially(self) -> None:
        validator = MoveValidator(Board.initial())
        assert validator.has_legal_moves(Color.WHITE)
        assert validator.has_legal_moves(Color.BLACK)

    def test_legal_moves_are_valid(self) -> None:
        board = Board.initial()
        validator = MoveValidator(board)
        moves = validator.legal_moves(Color.WHITE)
        assert moves
        for move in moves:
            assert move.piece.color == Color.WHITE
            assert validator.is_valid_move(move.piece, move.destination)

    def test_captured_piece_filled_in(self) -> None:
        rook = _w(PieceType.ROOK, 0, 0, 0)
        victim = _b(PieceType.PAWN, 0, -3, 3)
        board = _board(rook, victim)
        captures = [m for m in MoveValidator(board).legal_moves(Color.WHITE) if m.is_capture]
        assert any(m.captured is victim for m in captures)
