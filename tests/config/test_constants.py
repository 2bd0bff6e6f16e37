from grid_automata.config.constants import (
    ACTIVE_CHAR,
    ADJACENT_CROWD_THRESHOLD,
    CUBE_GENERATIONS,
    HEX_GENERATIONS,
    INPUT_SUFFIX,
    TOBOGGAN_SLOPE,
    TOBOGGAN_SLOPES,
    VISIBLE_CROWD_THRESHOLD,
)


def test_active_char_is_single_character() -> None:
    assert isinstance(ACTIVE_CHAR, str) and len(ACTIVE_CHAR) == 1


def test_generation_counts_are_positive() -> None:
    assert isinstance(CUBE_GENERATIONS, int) and CUBE_GENERATIONS > 0
    assert isinstance(HEX_GENERATIONS, int) and HEX_GENERATIONS > 0


def test_crowd_thresholds_fit_moore_neighborhood() -> None:
    assert 1 <= ADJACENT_CROWD_THRESHOLD <= 8
    assert 1 <= VISIBLE_CROWD_THRESHOLD <= 8
    assert VISIBLE_CROWD_THRESHOLD > ADJACENT_CROWD_THRESHOLD


def test_default_slope_is_in_product_slopes() -> None:
    assert TOBOGGAN_SLOPE in TOBOGGAN_SLOPES
    assert all(down >= 1 for _, down in TOBOGGAN_SLOPES)


def test_input_suffix_is_text_file() -> None:
    assert INPUT_SUFFIX.endswith(".txt")
