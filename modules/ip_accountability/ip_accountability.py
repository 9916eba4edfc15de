from core.types import Block

id = "ip_accountability"
title = "IP Accountability (Drug/Device)"

blocks = [
    Block.grid([
        "IP/Device", "Lot/Kit", "Strength/Model", "Exp. Date", "Quantity dispensed", "Returned", "Balance",
    ], rows=3),
    Block.bullet("Storage conditions (temp/log) | Chain of custody | Destroyed? (date/by whom)"),
    Block.signature("Pharmacist/Designee"),
    Block.signature("Investigator"),
]
