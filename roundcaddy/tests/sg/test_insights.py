from roundcaddy.sg.insights import (
    RECOMMENDATIONS,
    identify_strongest_area,
    identify_weakest_area,
)
from roundcaddy.sg.schemas import SGCategory, StrokesGainedResult


def test_weakest_area_with_recommendation() -> None:
    sg = StrokesGainedResult(
        sg_off_tee=0.4, sg_approach=-1.2, sg_around_green=0.1, sg_putting=-0.3
    )
    insight = identify_weakest_area(sg)

    assert insight.area is SGCategory.APPROACH
    assert insight.label == "Approach"
    assert insight.value == -1.2
    assert insight.recommendation == RECOMMENDATIONS[SGCategory.APPROACH]


def test_strongest_area() -> None:
    sg = StrokesGainedResult(
        sg_off_tee=0.4, sg_approach=-1.2, sg_around_green=0.1, sg_putting=0.9
    )
    insight = identify_strongest_area(sg)
    assert insight.area is SGCategory.PUTTING
    assert insight.label == "Putting"


def test_ties_resolve_in_category_order() -> None:
    flat = StrokesGainedResult()
    assert identify_weakest_area(flat).area is SGCategory.OFF_TEE
    assert identify_strongest_area(flat).area is SGCategory.OFF_TEE

    sg = StrokesGainedResult(sg_around_green=-1.0, sg_putting=-1.0)
    assert identify_weakest_area(sg).area is SGCategory.AROUND_GREEN


def test_recommendations_cover_every_category() -> None:
    assert set(RECOMMENDATIONS) == set(SGCategory)
    putting = RECOMMENDATIONS[SGCategory.PUTTING]
    assert putting == "Focus on speed control and short putts"
