from llm.context import build_hole_context
from llm.prompts import build_caddie_system_prompt
from models import PlayerProfile


# ================================================================
# Context block
# ================================================================

def test_context_block_pinehurst(pinehurst, current_round, profile):
    hole = pinehurst.get_hole(7)
    context = build_hole_context(pinehurst, hole, current_round, profile)

    assert context == (
        "- Course: Pinehurst\n"
        "- Currently on: Hole #7 (Par 4, 380 yds)\n"
        "- Historical Performance on this hole: Player has played this hole 2 times "
        "with an average score of 4.00.\n"
        "- Weather: Overcast, 15 mph wind from the west"
    )


def test_context_block_no_history(pinehurst, current_round, profile):
    context = build_hole_context(pinehurst, pinehurst.get_hole(2), current_round, profile)
    assert "No previous history on this hole." in context
    assert "average score" not in context


def test_context_block_includes_notes_only_when_present(pinehurst, current_round, profile):
    hole = pinehurst.get_hole(7)
    assert "organic notes" not in build_hole_context(pinehurst, hole, current_round, profile)

    hole.add_note("Green is very fast today")
    hole.add_note("Right bunker is a magnet")
    context = build_hole_context(pinehurst, hole, current_round, profile)
    assert "- Your organic notes on this hole: Green is very fast today, Right bunker is a magnet" in context
    assert "General Player Tendencies" not in context


def test_context_block_includes_tendencies_only_when_present(pinehurst, current_round):
    hole = pinehurst.get_hole(7)
    profile = PlayerProfile(tendencies=["Pulls 7-iron left when nervous", "Aggressive off the tee"])
    context = build_hole_context(pinehurst, hole, current_round, profile)

    assert context.endswith(
        "- General Player Tendencies: Pulls 7-iron left when nervous, Aggressive off the tee"
    )
    assert "organic notes" not in context


def test_context_block_line_order(pinehurst, current_round):
    hole = pinehurst.get_hole(7)
    hole.add_note("Plays into the wind")
    profile = PlayerProfile(tendencies=["Fades under pressure"])
    lines = build_hole_context(pinehurst, hole, current_round, profile).splitlines()

    prefixes = [
        "- Course:",
        "- Currently on:",
        "- Historical Performance on this hole:",
        "- Your organic notes on this hole:",
        "- Weather:",
        "- General Player Tendencies:",
    ]
    assert len(lines) == len(prefixes)
    for line, prefix in zip(lines, prefixes):
        assert line.startswith(prefix)


def test_context_block_is_deterministic(pinehurst, current_round):
    hole = pinehurst.get_hole(7)
    profile = PlayerProfile(tendencies=["Fades under pressure"])
    first = build_hole_context(pinehurst, hole, current_round, profile)
    second = build_hole_context(pinehurst, hole, current_round, profile)
    assert first == second


# ================================================================
# System prompt
# ================================================================

def test_system_prompt_is_byte_identical_for_same_state(pinehurst, current_round, profile):
    hole = pinehurst.get_hole(7)
    first = build_caddie_system_prompt(pinehurst, hole, current_round, profile)
    second = build_caddie_system_prompt(pinehurst, hole, current_round, profile)
    assert first.encode() == second.encode()


def test_system_prompt_embeds_context(pinehurst, current_round, profile):
    hole = pinehurst.get_hole(7)
    prompt = build_caddie_system_prompt(pinehurst, hole, current_round, profile)
    assert "**Current Context:**\n" + build_hole_context(pinehurst, hole, current_round, profile) in prompt


def test_system_prompt_rules_in_priority_order(pinehurst, current_round, profile):
    prompt = build_caddie_system_prompt(pinehurst, pinehurst.get_hole(7), current_round, profile)
    positions = [
        prompt.index("NEVER Ask for Structured Data"),
        prompt.index("Be a Conversational Partner"),
        prompt.index("Listen and Learn"),
        prompt.index("Reference Your Memory"),
    ]
    assert positions == sorted(positions)


def test_system_prompt_never_asks_for_structured_fields(pinehurst, current_round, profile):
    prompt = build_caddie_system_prompt(pinehurst, pinehurst.get_hole(7), current_round, profile).lower()
    for pattern in ("what club", "which club", "what was the outcome", "what did you score", "what was your score"):
        assert pattern not in prompt


def test_system_prompt_has_examples_and_conservative_directive(pinehurst, current_round, profile):
    prompt = build_caddie_system_prompt(pinehurst, pinehurst.get_hole(7), current_round, profile)
    assert "extract nothing" in prompt
    assert "extract 'courseNote'" in prompt
    assert "Be CONSERVATIVE with data extraction" in prompt
    assert 'If they say "Bad shot", do not extract anything.' in prompt
    assert "extract club: '7-Iron' and outcome: 'Bunker'" in prompt
    assert prompt.index("**Example Interactions") < prompt.index("**Your Task:**")
