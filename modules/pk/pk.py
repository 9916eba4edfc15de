from core.types import Block

id = "pk"
title = "PK Collection (optional per protocol)"

blocks = [
    Block.para("PK per protocol (only if required)."),
    Block.grid(["Timepoint", "Actual Time", "Volume", "Tube/Label", "Handling", "Notes"], rows=4),
    Block.pi(),
]
