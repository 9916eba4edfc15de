from core.types import Block

id = "adverse_events"
title = "Adverse Events"
repeatable = True

blocks = [
    Block.para("Any adverse events since last visit? Yes ☐  No ☐"),
    Block.repeat("AE", [
        "Term ______________  Onset ____-___-____  Resolved ____-___-____  Ongoing ☐",
        "Severity: Mild ☐  Moderate ☐  Severe ☐   Serious? Yes ☐  No ☐",
        "Relationship to IP: Related ☐  Not related ☐   Action taken: ______  Outcome: ______",
    ]),
    Block.para("SAEs reported to sponsor within 24 hours of awareness. Date/Time reported: ____-___-____  ____:____"),
    Block.signature("Investigator"),
]
