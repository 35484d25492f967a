"""
Tests for the characteristic extractor
특징 추출 테스트
"""

from rock_identifier.characteristics import (
    COLOR_RULES,
    extract_characteristics,
    match_last,
)
from rock_identifier.models import UNKNOWN


def test_empty_description_is_all_unknown():
    """빈 입력 → 모든 차원 unknown, 키워드 없음"""
    for description in ("", None):
        c = extract_characteristics(description)
        assert c.texture == UNKNOWN
        assert c.color == UNKNOWN
        assert c.hardness == UNKNOWN
        assert c.luster == UNKNOWN
        assert c.crystal_size == UNKNOWN
        assert c.keywords == ()


def test_keywords_are_lowercase_whitespace_tokens():
    c = extract_characteristics("  Dark   Fine-grained\tRock ")
    assert c.keywords == ("dark", "fine-grained", "rock")


def test_glassy_description():
    c = extract_characteristics("glassy shiny volcanic rock")
    assert c.texture == "glassy"
    # shiny → metallic, then glassy → vitreous overwrites it
    assert c.luster == "vitreous"
    assert c.crystal_size == "none"


def test_vesicular_light_description():
    c = extract_characteristics("porous light volcanic foam")
    assert c.texture == "vesicular"
    assert c.color == "light"


def test_last_matching_rule_wins():
    """같은 차원에서 선언 순서상 마지막으로 일치한 규칙이 결과"""
    assert extract_characteristics("light gray stone").color == "gray"
    assert extract_characteristics("white with dark specks").color == "light"
    assert extract_characteristics("coarse but smooth to the touch").texture == "fine"
    assert extract_characteristics("soft yet hard").hardness == "soft"
    # crystalline is declared before glass, so "scratches glass" wins
    assert extract_characteristics("crystalline, scratches glass").texture == "glassy"


def test_match_last_returns_unknown_without_match():
    assert match_last("nothing to see", COLOR_RULES) == UNKNOWN


def test_red_requires_word_start():
    assert extract_characteristics("layered rock").color == UNKNOWN
    assert extract_characteristics("reddish layered rock").color == "red"


def test_crystal_size_and_hardness():
    c = extract_characteristics("hard rock with large crystals, difficult to scratch")
    assert c.crystal_size == "large"
    assert c.hardness == "hard"

    c = extract_characteristics("crumbly earthy rock with tiny crystals")
    assert c.crystal_size == "small"
    assert c.hardness == "soft"
    assert c.luster == "dull"


def test_image_colors_are_passed_through_only():
    c = extract_characteristics(None, {"colors": ["#333333", "black"], "texture": "rough"})
    assert c.dominant_colors == ("#333333", "black")
    assert c.texture == UNKNOWN
    assert c.color == UNKNOWN


def test_characteristics_to_dict_uses_camel_case():
    data = extract_characteristics("large crystals").to_dict()
    assert data["crystalSize"] == "large"
    assert data["keywords"] == ["large", "crystals"]


def test_word_start_anchors_avoid_false_matches():
    """crust 안의 rust, hardness 안의 hard는 매칭하지 않음"""
    assert extract_characteristics("white rock from the continental crust").color == "light"
    assert extract_characteristics("rust colored stone").color == "red"
    assert extract_characteristics("rock of low hardness").hardness == UNKNOWN
    assert extract_characteristics("very hard rock").hardness == "hard"
