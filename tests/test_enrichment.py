"""
Tests for the enrichment stage
참조 데이터 보강 테스트
"""

from rock_identifier.classifier import identify_rock
from rock_identifier.enrichment import enrich_offline, enrich_rock
from rock_identifier.models import Identification, RockType
from rock_identifier.reference_data import COMPOSITION, DEFAULT_LOCATIONS, FUN_FACTS, USES
from rock_identifier.tools.base import LookupResult


def _mystery_rock(rock_type=RockType.SEDIMENTARY):
    return Identification(
        name="Mystery Rock",
        rock_type=rock_type,
        confidence=40,
        formation="Unknown",
        subtype="unknown",
        texture_type="unknown",
    )


def _failing_summary(name):
    return LookupResult.failure("timeout")


def _no_locations(name):
    return LookupResult.failure("not configured", {"features": [], "locations": []})


def test_static_tables_for_known_rock():
    rock = enrich_offline(identify_rock("basalt"))
    assert rock.composition == COMPOSITION["Basalt"]
    assert rock.uses == USES["Basalt"]
    assert rock.classification.group == "Mafic Extrusive"
    assert rock.classification.series == "Tholeiitic"
    assert rock.fun_facts == FUN_FACTS["Basalt"]
    assert rock.locations == DEFAULT_LOCATIONS["igneous"]
    assert rock.image is None


def test_unknown_rock_gets_generic_fallbacks():
    """미등록 암석 → 비어 있지 않은 일반 문구, 분류 그룹에 rock type 유지"""
    rock = enrich_rock(_mystery_rock(), fetch_summary=_failing_summary, fetch_locations=_no_locations)
    assert rock.composition == ("Mineral composition varies",)
    assert rock.uses == ("Various industrial and construction applications",)
    assert len(rock.fun_facts) == 1
    assert "Mystery Rock" in rock.fun_facts[0]
    assert rock.classification.group == "sedimentary rock"
    assert rock.classification.family is None
    assert rock.locations == DEFAULT_LOCATIONS["sedimentary"]


def test_summary_success_replaces_fun_facts_and_sets_image():
    def summary(name):
        assert name == "Pumice"
        return LookupResult.success({
            "extract": "Pumice is a highly vesicular volcanic rock.",
            "thumbnail": "https://upload.example.org/pumice.jpg",
        })

    rock = enrich_rock(identify_rock("porous light volcanic foam"),
                       fetch_summary=summary, fetch_locations=_no_locations)
    assert rock.fun_facts == ("Pumice is a highly vesicular volcanic rock.",)
    assert rock.image == "https://upload.example.org/pumice.jpg"


def test_summary_without_extract_uses_templated_fact():
    rock = enrich_rock(identify_rock("schist"),
                       fetch_summary=lambda name: LookupResult.success({"extract": None, "thumbnail": None}),
                       fetch_locations=_no_locations)
    assert rock.fun_facts == ("Schist is a type of rock with unique geological properties.",)
    assert rock.image is None


def test_summary_failure_keeps_static_fun_facts():
    """요약 조회 실패 → 정적 fun facts (없으면 일반 문구), 빈 리스트 아님"""
    rock = enrich_rock(identify_rock("limestone"), fetch_summary=_failing_summary, fetch_locations=_no_locations)
    assert rock.fun_facts == FUN_FACTS["Limestone"]
    assert rock.image is None

    rock = enrich_rock(identify_rock("scoria"), fetch_summary=_failing_summary, fetch_locations=_no_locations)
    assert "Scoria" not in FUN_FACTS
    assert rock.fun_facts == ("Scoria has unique geological properties that make it scientifically interesting.",)


def test_located_features_replace_default_locations():
    def locations(name):
        return LookupResult.success({"features": [], "locations": [
            {"name": "Giant's Causeway", "country": "United Kingdom"},
            {"name": "Devils Postpile", "country": None},
            {"name": None, "country": "Nowhere"},
        ]})

    rock = enrich_rock(identify_rock("basalt"), fetch_summary=None, fetch_locations=locations)
    assert rock.locations == ("Giant's Causeway, United Kingdom", "Devils Postpile")


def test_empty_location_lookup_uses_rock_type_defaults():
    rock = enrich_rock(identify_rock("marble"), fetch_summary=None,
                       fetch_locations=lambda name: LookupResult.success({"features": [], "locations": []}))
    assert rock.locations == DEFAULT_LOCATIONS["metamorphic"]


def test_default_lookups_degrade_when_network_is_down():
    """기본 조회 함수 + 네트워크 차단 → 정적 데이터"""
    rock = enrich_rock(identify_rock("granite"))
    assert rock.fun_facts == FUN_FACTS["Granite"]
    assert rock.locations == DEFAULT_LOCATIONS["igneous"]
    assert rock.image is None


def test_enriched_rock_json_shape():
    data = enrich_offline(identify_rock("glassy shiny volcanic rock")).to_dict()
    assert data["name"] == "Obsidian"
    assert data["type"] == "igneous"
    assert data["textureType"] == "glassy"
    assert data["classification"] == {"group": "Felsic Extrusive", "family": "Volcanic Glass"}
    assert isinstance(data["funFacts"], list) and data["funFacts"]
    assert "image" not in data


def test_reference_tables_use_exact_names():
    """테이블은 정확한 암석명으로만 조회, 별칭 정규화는 normalize_rock_name 담당"""
    from rock_identifier.reference_data import get_catalog, get_composition, get_uses, normalize_rock_name

    assert normalize_rock_name("  chalk ") == "Limestone"
    assert normalize_rock_name("BASALT") == "Basalt"
    assert normalize_rock_name("kryptonite") is None
    assert get_composition("Shale") == COMPOSITION["Shale"]
    assert get_composition("mudstone") == ("Mineral composition varies",)
    assert get_uses("granite") == ("Various industrial and construction applications",)
    assert len(get_catalog()) == 12
