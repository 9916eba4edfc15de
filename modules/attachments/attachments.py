from core.types import Block

id = "attachments"
title = "Attachments / Images (placeholder)"

blocks = [
    Block.para("Attachments / Images: Record file names and place printed copies behind this form."),
    Block.bullet("File/Report name(s): ________________________________________________"),
]
