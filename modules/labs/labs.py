from core.types import Block

id = "labs"
title = "Labs & Specimen Collection"

# wide collection grid; one row per tube drawn
blocks = [
    Block.grid([
        "Specimen", "Date", "Time", "Fasting?", "Volume", "Tube", "Collected By",
        "Processed?", "Centrifuge", "Frozen Temp", "Shipped?", "Courier", "Notes",
    ], rows=3),
    Block.pi(),
]
