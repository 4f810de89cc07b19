# tests/test_tools.py
import pytest

from dungen.cells import FLOOR, STONE, WALL
from dungen.grid import Grid

def test_dgtool_emits_ascii(capsys):
    import dgtool
    dgtool.main(["emit", "--width", "12", "--height", "7", "--seed", "3", "--preset", "caves"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert all(len(ln) == 12 and set(ln) <= set("#+.") for ln in lines)

def test_dgtool_writes_tsv(tmp_path):
    import dgtool
    out = tmp_path / "grid.tsv"
    dgtool.main(["emit", "--width", "9", "--height", "5", "--seed", "1", "--steps", "noise,smooth", "--out", str(out)])
    rows = [ln.split("\t") for ln in out.read_text().splitlines()]
    assert len(rows) == 5 and all(len(r) == 9 for r in rows)
    assert {v for r in rows for v in r} <= {"0", "1", "2"}

def test_dgtool_lists_presets(capsys):
    import dgtool
    dgtool.main(["presets"])
    out = capsys.readouterr().out
    assert "dungeon: rooms_split, maze, fill_rooms" in out

def test_render_image_colours_cells(tmp_path):
    pytest.importorskip("PIL")
    import render_grid
    g = Grid(3, 2, seed=1)
    g.set(1, 0, WALL)
    g.set(2, 1, FLOOR)
    img = render_grid.render_image(g, tile_size=4)
    assert img.size == (12, 8)
    assert img.getpixel((1, 1)) == render_grid.PALETTE[STONE]
    assert img.getpixel((5, 1)) == render_grid.PALETTE[WALL]
    assert img.getpixel((9, 5)) == render_grid.PALETTE[FLOOR]
    out = tmp_path / "png" / "g.png"
    render_grid.render_grid(g, str(out), tile_size=2)
    assert out.exists()

def test_dgtool_rejects_steps_that_need_arguments(capsys):
    import dgtool
    with pytest.raises(SystemExit) as exc:
        dgtool.main(["emit", "--width", "6", "--height", "6", "--steps", "noise,replace_all"])
    assert exc.value.code == 2
    assert "replace_all needs arguments (a, b)" in capsys.readouterr().err
    with pytest.raises(SystemExit):
        dgtool.main(["emit", "--steps", "noise,tunnels"])
