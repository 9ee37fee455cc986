"""Captures: mandatory jumps and maximal multi-jump chains."""

from Qirkat_AI.Board import Board
from Qirkat_AI.Move import parse_move
from Qirkat_AI.PieceColor import BLACK, EMPTY, WHITE

# White d2 with black c2, b3, c3 around it: three capture chains.
CHAIN_LAYOUT = "----- --bw- -bb-- ----- -----"


def test_chain_enumeration_offers_only_full_chains():
    b = Board()
    b.set_pieces(CHAIN_LAYOUT, WHITE)
    assert b.jump_possible()
    assert b.jump_possible("d", "2")
    assert not b.jump_possible("c", "2")  # black piece, White to move
    moves = [str(mv) for mv in b.get_moves()]
    assert moves == ["d2-b4-b2-d2", "d2-b2-d4", "d2-b2-b4-d2"]
    assert "d2-b4" not in moves
    assert "d2-b2" not in moves


def test_every_chain_ends_where_no_further_jump_exists():
    b = Board()
    b.set_pieces(CHAIN_LAYOUT, WHITE)
    for mv in b.get_moves():
        after = b.value_copy()
        after.apply(mv)
        after.whose_move = WHITE
        last = list(mv.hops())[-1]
        assert not after.jump_possible(last.to_index)


def test_applying_chain_removes_all_captured_pieces():
    b = Board()
    b.set_pieces(CHAIN_LAYOUT, WHITE)
    b.apply(parse_move("d2-b4-b2-d2"))
    assert b.positions.count(BLACK) == 0
    assert b.get("d", "2") is WHITE
    assert b.get("b", "4") is EMPTY
    assert b.get("b", "2") is EMPTY
    assert b.game_over()


def test_capture_is_mandatory():
    b = Board()
    b.apply(parse_move("c2-c3"))
    # Black c4 may jump c3; that is then Black's only kind of move.
    assert b.jump_possible()
    moves = b.get_moves()
    assert moves
    assert all(mv.is_jump for mv in moves)
    assert [str(mv) for mv in moves] == ["c4-c2"]


def test_jump_needs_opposing_piece_in_between():
    b = Board()
    b.set_pieces("----- --ww- ----- ----- ----b", WHITE)
    assert not b.legal_move(parse_move("c2-e2"))
    assert not b.jump_possible()
    assert all(not mv.is_jump for mv in b.get_moves())


def test_forced_capture_when_steps_also_available():
    b = Board()
    b.set_pieces("----- -w--- -b--- ----- ----b", WHITE)
    # b2 could step to c2, but it must jump b3 instead.
    assert b.legal_move(parse_move("b2-c2"))
    moves = b.get_moves()
    assert [str(mv) for mv in moves] == ["b2-b4"]
    for mv in moves:
        after = b.value_copy()
        after.apply(mv)
        after.whose_move = WHITE
        assert not after.jump_possible(mv.to_index)


def test_check_jump_validates_whole_sequence():
    b = Board()
    b.set_pieces(CHAIN_LAYOUT, WHITE)
    assert b.check_jump(parse_move("d2-b4-b2-d2"))
    assert b.check_jump(parse_move("d2-b4"))
    assert b.check_jump(parse_move("d2-b4"), allow_partial=True)
    assert b.check_jump(parse_move("d2-b4-d4"), allow_partial=True)
    assert not b.check_jump(parse_move("d2-b4-d4"))
    assert not b.check_jump(parse_move("d2-d3"), allow_partial=True)
    assert b.check_jump(None)
    assert not b.check_jump(None, allow_partial=True)


def test_capture_clears_direction_marker_of_captured_piece():
    b = Board()
    b.set_pieces("----- ----- ---w- ----b -----", BLACK)
    b.apply(parse_move("e4-d4"))
    assert b.directions[18] == -1
    b.apply(parse_move("d3-d5"))
    assert b.get("d", "4") is EMPTY
    assert b.directions == [0] * 25


def test_multi_jump_from_scripted_game():
    b = Board()
    for text in ["c2-c3", "c4-c2", "c1-c3", "a3-c1", "c3-a3", "c5-c4"]:
        b.apply(parse_move(text))
    assert "a3-c5-c3" in [str(mv) for mv in b.get_moves()]
    assert all(mv.is_jump for mv in b.get_moves())
