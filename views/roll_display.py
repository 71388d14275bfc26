"""
Roll presentation

Builds a display model from a resolved roll: the total badge, the optional
failure badge, one glyph per die and the pip indicator. Rendering consumes the
roll's one-shot `mark_first_max` flag and returns the cleared copy.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from constants import DIE_GLYPHS, FAILURE_BADGE, TEMPLATE_PLACEHOLDER
from models.roll import RollResult, RollType
from services.scoring import score
from views.embeds import EmbedColors


class DieRole(Enum):
    NORMAL = "normal"
    WILD = "wild"
    BONUS = "bonus"
    NEGATED = "negated"


@dataclass(frozen=True)
class DieGlyph:
    face: int
    role: DieRole = DieRole.NORMAL

    @property
    def glyph(self) -> str:
        return DIE_GLYPHS[self.face]


@dataclass(frozen=True)
class RollDisplay:
    """Everything needed to show one roll."""
    roll_type: RollType
    total: int
    badge_color: int
    fail_total: Optional[int] = None
    dice: List[DieGlyph] = field(default_factory=list)
    pips_label: str = ""

    @property
    def zero_out(self) -> bool:
        return self.fail_total is not None


def format_pips(pips: int) -> str:
    """Signed pip indicator, empty when there are no pips."""
    if pips == 0:
        return ""
    return f"+{pips}" if pips > 0 else str(pips)


def ordinary_glyphs(result: RollResult) -> List[DieGlyph]:
    """
    Glyphs for the ordinary dice.

    When `mark_first_max` is set, the first die showing the highest value is
    negated.
    """
    pending = result.mark_first_max
    highest = max(result.dice) if result.dice else None
    glyphs = []
    for die in result.dice:
        if pending and die == highest:
            glyphs.append(DieGlyph(die, DieRole.NEGATED))
            pending = False
        else:
            glyphs.append(DieGlyph(die))
    return glyphs


def build_roll_display(result: RollResult) -> Tuple[RollDisplay, RollResult]:
    """
    Build the display for a resolved roll.

    Returns:
        The display and a copy of `result` with `mark_first_max` cleared
    """
    roll_score = score(result)
    glyphs = ordinary_glyphs(result)
    glyphs.append(DieGlyph(result.wild_die, DieRole.WILD))
    glyphs.extend(DieGlyph(die, DieRole.BONUS) for die in result.bonus_dice)

    display = RollDisplay(
        roll_type=result.type,
        total=roll_score.total,
        badge_color=EmbedColors.ZERO_OUT if roll_score.zero_out else EmbedColors.ROLL,
        fail_total=max(0, roll_score.sum_fail) if roll_score.zero_out else None,
        dice=glyphs,
        pips_label=format_pips(result.pips),
    )
    return display, result.model_copy(update={'mark_first_max': False})


_GLYPH_STYLES = {
    DieRole.NORMAL: "{}",
    DieRole.WILD: "**{}**",
    DieRole.BONUS: "__{}__",
    DieRole.NEGATED: "~~{}~~",
}


def render_dice_line(display: RollDisplay) -> str:
    """Markdown line of die glyphs followed by the pip indicator."""
    parts = [_GLYPH_STYLES[die.role].format(die.glyph) for die in display.dice]
    if display.pips_label:
        parts.append(f"`{display.pips_label}`")
    return " ".join(parts)


def render_roll_text(display: RollDisplay) -> str:
    """Deterministic one-line summary of a roll."""
    badges = f"**{display.total}**"
    if display.zero_out:
        badges = f"{FAILURE_BADGE} **{display.fail_total}** / {badges}"
    return f"{badges} {render_dice_line(display)}"


def wrap_in_template(payload: str, template: Optional[str]) -> str:
    """Substitute the payload for the first roll placeholder in `template`."""
    if not template:
        return payload
    return re.sub(re.escape(TEMPLATE_PLACEHOLDER), lambda _: payload, template, count=1, flags=re.IGNORECASE)
