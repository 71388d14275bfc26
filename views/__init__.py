"""
Discord presentation for Gemini Dice

- views.embeds: shared embed colors and templates
- views.roll_display: display model for a resolved roll and its text rendering
- views.roll_embeds: roll and help embeds
"""
