from datetime import date

from codechef_card.models import ProfileCard
from codechef_card.models import ProfileFields
from codechef_card.render.svg import render_card
from codechef_card.render.svg import render_heatmap
from codechef_card.render.svg import render_legend
from codechef_card.services.heatmap_service import COLOR_TIERS
from codechef_card.services.heatmap_service import layout_heatmap


TODAY = date(2026, 2, 20)


def make_card(username: str = "chef", profile: ProfileFields | None = None) -> ProfileCard:
    return ProfileCard(
        username=username,
        profile=profile or ProfileFields(),
        layout=layout_heatmap({TODAY: 4}, TODAY),
        activity_source="scraped",
        total=4,
    )


def test_render_heatmap_emits_one_rect_per_cell() -> None:
    svg = render_heatmap(layout_heatmap({}, TODAY))

    assert svg.count("<rect") == 364
    assert "<svg" not in svg
    assert f"<title>{TODAY.isoformat()}: 0</title>" in svg


def test_render_legend_shows_every_tier() -> None:
    svg = render_legend(25, 300)

    assert svg.count("<rect") == len(COLOR_TIERS)
    for tier in COLOR_TIERS:
        assert f'fill="{tier.color}"' in svg
    assert ">Less<" in svg
    assert ">More<" in svg


def test_render_card_has_single_svg_root() -> None:
    svg = render_card(make_card())

    assert svg.startswith("<svg")
    assert svg.count("<svg") == 1
    assert svg.rstrip().endswith("</svg>")


def test_render_card_shows_profile_fields_and_initial() -> None:
    profile = ProfileFields(
        rating="1874", highest_rating="2011", global_rank="4210", country_rank="1337"
    )

    svg = render_card(make_card(username="chef", profile=profile))

    assert ">C</text>" in svg
    assert "CodeChef · chef" in svg
    for value in ("1874", "2011", "4210", "1337"):
        assert f">{value}</tspan>" in svg


def test_render_card_escapes_username() -> None:
    svg = render_card(make_card(username='<svg onload="x">&'))

    assert svg.count("<svg") == 1
    assert "&lt;svg onload=&quot;x&quot;&gt;&amp;" in svg


def test_render_card_is_wide_enough_for_heatmap() -> None:
    card = make_card()

    svg = render_card(card)

    expected_width = card.layout.width + 40
    assert f'width="{expected_width}"' in svg
