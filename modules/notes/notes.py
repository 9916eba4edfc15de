from core.types import Block

id = "notes"
title = "Notes"

blocks = [
    Block.para("Notes / Deviations / Clarifications:"),
    Block.para("______________________________________________________________________________"),
    Block.para("______________________________________________________________________________"),
]
