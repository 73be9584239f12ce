import pytest

from cubecaster.mapcheck import ConfigError
from cubecaster.parser import (
    Scene,
    c_atoi,
    check_extension,
    identify_line,
    load_scene,
    parse_rgb,
    parse_scene,
    texture_path,
)

MAP = ["111\n", "1N1\n", "111\n"]

HEADER = [
    "NO ./north.xpm\n",
    "SO ./south.xpm\n",
    "\n",
    "WE ./west.xpm\n",
    "EA ./east.xpm\n",
    "F 255,0,0\n",
    "   C 0,0,0\n",
]

XPM = 'static char *t[] = {\n"2 1 1 1",\n"a c #FF0000",\n"aa"\n};\n'


def _identity(path):
    return path


def test_c_atoi_plain_values():
    assert c_atoi("42") == 42
    assert c_atoi("  -7") == -7
    assert c_atoi("+5") == 5
    assert c_atoi("12abc") == 12
    assert c_atoi("-") == 0


def test_c_atoi_empty_and_blank_give_minus_one():
    assert c_atoi("") == -1
    assert c_atoi(" \n") == -1


def test_c_atoi_overflow():
    assert c_atoi("9223372036854775808") == -1
    assert c_atoi("-9223372036854775808") == 0


@pytest.mark.parametrize("path", [".cub", "map.txt", "cub", "map.cubx"])
def test_check_extension_rejects(path):
    with pytest.raises(ConfigError, match="Not valid extension"):
        check_extension(path)


def test_identify_line_known_elements():
    assert identify_line("NO ./a.xpm\n", set()) == "NO"
    assert identify_line("   F 1,2,3\n", set()) == "F"
    assert identify_line("C 1,2,3\n", {"F"}) == "C"


def test_identify_line_blank():
    assert identify_line("   \n", set()) is None
    assert identify_line("\n", set()) is None


@pytest.mark.parametrize(
    "line, seen",
    [("NO ./a\n", {"NO"}), ("XX y\n", set()), ("NO\n", set()), ("   ", set())],
)
def test_identify_line_invalid(line, seen):
    with pytest.raises(ConfigError, match="Not a valid identifier"):
        identify_line(line, seen)


def test_parse_rgb_values():
    assert parse_rgb(" 255,255,255\n") == 0xFFFFFF
    assert parse_rgb("255,0,0") == 0xFF0000
    assert parse_rgb("0, 0 ,0\n") == 0


@pytest.mark.parametrize(
    "value, message",
    [
        ("1,2\n", "More or less than 2 comma"),
        ("1,2,3,4\n", "More or less than 2 comma"),
        ("1,2,a\n", "Not valid RGB 1"),
        ("1,,2\n", "Not valid RGB 2"),
        ("256,0,0\n", "Not valid RGB"),
        ("1, ,2\n", "Not valid RGB"),
        ("1,2,\n", "Not valid RGB"),
    ],
)
def test_parse_rgb_errors(value, message):
    with pytest.raises(ConfigError, match=message):
        parse_rgb(value)


def test_texture_path():
    assert texture_path("NO ./path/to.xpm  \n") == "./path/to.xpm"
    assert texture_path("  SO   tex.xpm\n") == "tex.xpm"
    assert texture_path("EA a b") == "a b"


def test_parse_scene_valid():
    scene = parse_scene(HEADER + ["\n"] + MAP, _identity)
    assert isinstance(scene, Scene)
    assert scene.textures == {
        "NO": "./north.xpm",
        "SO": "./south.xpm",
        "WE": "./west.xpm",
        "EA": "./east.xpm",
    }
    assert scene.floor == parse_rgb("255,0,0")
    assert scene.ceiling == parse_rgb("0,0,0")
    assert scene.rows == ["111", "1N1", "111"]


def test_parse_scene_missing_data():
    with pytest.raises(ConfigError, match="Missing data"):
        parse_scene(HEADER[:-1], _identity)


def test_parse_scene_duplicate_element():
    lines = ["NO a\n", "NO b\n"] + HEADER[1:] + MAP
    with pytest.raises(ConfigError, match="Not a valid identifier"):
        parse_scene(lines, _identity)


def test_parse_scene_texture_failure():
    def failing(path):
        raise OSError(path)

    with pytest.raises(ConfigError, match="Texture not valid"):
        parse_scene(HEADER + MAP, failing)


def test_parse_scene_map_errors():
    with pytest.raises(ConfigError, match="Player char repeated"):
        parse_scene(HEADER + ["111\n", "1NS1\n", "111\n"], _identity)
    with pytest.raises(ConfigError, match="Invalid map"):
        parse_scene(HEADER, _identity)


def test_load_scene_reads_file_and_textures(tmp_path):
    texture = tmp_path / "wall.xpm"
    texture.write_text(XPM)
    header = [
        f"{key} {texture}\n" for key in ("NO", "SO", "WE", "EA")
    ] + ["F 255,0,0\n", "C 0,0,0\n"]
    scene_file = tmp_path / "level.cub"
    scene_file.write_text("".join(header + MAP))
    scene = load_scene(scene_file)
    assert set(scene.textures) == {"NO", "SO", "WE", "EA"}
    assert scene.textures["NO"].width == 2
    assert scene.textures["EA"].pixel(1, 0) == 0xFF0000
    assert scene.rows == ["111", "1N1", "111"]


def test_load_scene_bad_texture(tmp_path):
    scene_file = tmp_path / "level.cub"
    missing = tmp_path / "missing.xpm"
    scene_file.write_text(f"NO {missing}\n" + "".join(HEADER[1:] + MAP))
    with pytest.raises(ConfigError, match="Texture not valid"):
        load_scene(scene_file)


def test_load_scene_wrong_path(tmp_path):
    with pytest.raises(ConfigError, match="Wrong map path"):
        load_scene(tmp_path / "absent.cub")


def test_load_scene_bad_extension(tmp_path):
    with pytest.raises(ConfigError, match="Not valid extension"):
        load_scene(tmp_path / "level.txt")