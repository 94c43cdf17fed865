import pytest

from cubparse.config import Color, Direction
from cubparse.parser import (
    ConfigError,
    format_config,
    has_cub_extension,
    main,
    map_dimensions,
    parse_color,
    read_config,
)

MAP_LINES = ["111", "101", "1111"]

SAMPLE = (
    "NO ./north.xpm\n"
    "SO ./south.xpm\n"
    "WE ./west.xpm\n"
    "EA ./east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n" + "".join(line + "\n" for line in MAP_LINES)
)


def write(tmp_path, content, name="scene.cub"):
    path = tmp_path / name
    path.write_text(content)
    return path


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.cub", True),
        (".cub", True),
        ("dir/level.cub", True),
        ("cub", False),
        ("map.cu", False),
        ("map.cub.txt", False),
    ],
)
def test_has_cub_extension(name, expected):
    assert has_cub_extension(name) is expected


def test_parse_color_valid():
    assert parse_color("220,100,0") == Color(220, 100, 0)


def test_parse_color_skips_empty_components():
    assert parse_color("1,,2,3") == Color(1, 2, 3)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "256,0,0", "-1,0,0", ""])
def test_parse_color_invalid(text):
    with pytest.raises(ValueError):
        parse_color(text)


def test_map_dimensions_counts_from_map_start():
    lines = ["NO a\n", "\n", "111\n", "1\n"]
    assert map_dimensions(lines) == (len("111\n"), 2)


def test_map_dimensions_space_starts_map():
    lines = ["F 1,2,3\n", " 11\n", "\n"]
    width, height = map_dimensions(lines)
    assert height == 2
    assert width == len(" 11\n")


def test_map_dimensions_empty():
    assert map_dimensions([]) == (0, 0)


def test_read_config_textures_and_colors(tmp_path):
    config = read_config(write(tmp_path, SAMPLE))
    assert [t.path for t in config.textures] == [
        "./north.xpm",
        "./south.xpm",
        "./west.xpm",
        "./east.xpm",
    ]
    assert [t.id for t in config.textures] == list(Direction)
    assert config.floor_color == Color(220, 100, 0)
    assert config.ceiling_color == Color(225, 30, 0)
    assert config.element_count() == 6


def test_read_config_map_grid(tmp_path):
    config = read_config(write(tmp_path, SAMPLE))
    game_map = config.map
    assert game_map.height == len(MAP_LINES)
    assert game_map.width == max(len(line) + 1 for line in MAP_LINES)
    rows = game_map.rows()
    assert all(len(row) == game_map.width for row in rows)
    assert [row.rstrip(" ") for row in rows] == MAP_LINES


def test_read_config_textures_any_order(tmp_path):
    content = SAMPLE.replace("NO ./north.xpm\n", "").replace(
        "C 225,30,0\n", "C 225,30,0\nNO ./north.xpm\n"
    )
    config = read_config(write(tmp_path, content))
    assert config.textures[Direction.NO].path == "./north.xpm"


def test_read_config_bad_extension(tmp_path):
    with pytest.raises(ConfigError, match="Not a valid extension"):
        read_config(write(tmp_path, SAMPLE, name="scene.txt"))


def test_read_config_duplicate_floor(tmp_path):
    content = SAMPLE.replace("F 220,100,0\n", "F 220,100,0\nF 1,2,3\n")
    with pytest.raises(ConfigError, match="Duplicate Floor"):
        read_config(write(tmp_path, content))


def test_read_config_duplicate_direction(tmp_path):
    content = "NO ./other.xpm\n" + SAMPLE
    with pytest.raises(ConfigError, match="Duplicate direction"):
        read_config(write(tmp_path, content))


def test_read_config_wrong_identifier(tmp_path):
    content = "XX ./other.xpm\n" + SAMPLE
    with pytest.raises(ConfigError, match="wrong identifier"):
        read_config(write(tmp_path, content))


def test_read_config_missing_element(tmp_path):
    content = SAMPLE.replace("EA ./east.xpm\n", "")
    with pytest.raises(ConfigError, match="Invalide number of cfg element"):
        read_config(write(tmp_path, content))


def test_read_config_invalid_color_is_not_counted(tmp_path):
    content = SAMPLE.replace("F 220,100,0", "F 300,100,0")
    with pytest.raises(ConfigError, match="Invalide number of cfg element"):
        read_config(write(tmp_path, content))


def test_read_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "absent.cub")


def test_format_config_report(tmp_path):
    report = format_config(read_config(write(tmp_path, SAMPLE)))
    lines = report.splitlines()
    assert lines[0] == "Textures:"
    assert " 0: id=0 path=./north.xpm" in lines
    assert " 3: id=3 path=./east.xpm" in lines
    assert "Floor color: R=220 G=100 B=0" in lines
    assert "Ceiling color: R=225 G=30 B=0" in lines
    map_index = lines.index("MAP:")
    assert [row.rstrip(" ") for row in lines[map_index + 1 :]] == MAP_LINES


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_success(tmp_path, capsys):
    path = write(tmp_path, SAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("H= 3\n W=5\n")
    assert "MAP:\n" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert "Failed to parse config." in capsys.readouterr().err