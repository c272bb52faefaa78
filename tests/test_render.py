from colorama import Fore, Style
from rubiks import Color, Face, Move, MoveSequence, CubeState, render
from rubiks.render import COLOR_CODES

SOLVED = """
         UP
         W W W
         W W W
         W W W

LEFT     FRONT    RIGHT    BACK
O O O    G G G    R R R    B B B
O O O    G G G    R R R    B B B
O O O    G G G    R R R    B B B

         DOWN
         Y Y Y
         Y Y Y
         Y Y Y"""

def test_render_solved():
    assert render(CubeState.create_solved()) == SOLVED

def test_render_title():
    out = render(CubeState.create_solved(), "Final State")
    assert out.startswith("\nFinal State\n===========\n")
    assert out.endswith(SOLVED)

def test_render_blank_title_ignored():
    assert render(CubeState.create_solved(), "   ") == SOLVED

def test_render_after_challenge():
    state = CubeState.create_solved()
    for move in MoveSequence.challenge(): state.apply_move(move)

    lines = render(state).split("\n")
    assert lines[2:5] == ["         R O G", "         B W W", "         B B B"]
    assert lines[7:10] == [
        "G Y Y    O R R    Y B O    Y B W",
        "O O G    O G W    R R W    O B Y",
        "B G O    W W W    O Y R    Y Y W",
    ]
    assert lines[12:15] == ["         G G B", "         R Y R", "         R G G"]

def test_render_does_not_touch_state():
    state = CubeState.create_solved()
    state.apply_move(Move.clockwise(Face.R))
    before = state.copy()
    render(state, "x")
    assert state == before

def test_render_plain_has_no_escape_codes():
    assert "\033[" not in render(CubeState.create_solved())
    assert "\033[" not in render(CubeState.create_solved(), "Title")

def test_render_color_wraps_every_sticker():
    out = render(CubeState.create_solved(), color=True)

    assert out.count(Style.RESET_ALL) == 54
    assert f"{Fore.LIGHTGREEN_EX}G{Style.RESET_ALL}" in out
    assert f"{Fore.YELLOW}O{Style.RESET_ALL}" in out
    assert f"{Fore.LIGHTYELLOW_EX}Y{Style.RESET_ALL}" in out
    for c in Color: assert out.count(f"{COLOR_CODES[c]}{c.value}{Style.RESET_ALL}") == 9

def test_render_color_strips_to_plain():
    state = CubeState.create_solved()
    for move in MoveSequence.challenge(): state.apply_move(move)

    out = render(state, "Final State", color=True)
    for code in list(COLOR_CODES.values()) + [Style.RESET_ALL]: out = out.replace(code, "")
    assert out == render(state, "Final State")
