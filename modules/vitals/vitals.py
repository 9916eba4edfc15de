from core.types import Block

id = "vitals"
title = "Vitals (°C/°F, HR, BP, etc.)"
repeatable = True

blocks = [
    Block.para("Position: Sitting ☐  Supine ☐  Standing ☐"),
    Block.field("device", "Device"),
    Block.repeat("Reading", [
        "Time ____:____  HR ___  BP ___/___  RR ___  Temp ___°C (___°F)  SpO2 ___%",
        "Weight ___ kg  Height ___ cm  BMI ___ kg/m²  (omit if remote)",
    ]),
    Block.pi(),
    Block.signature("Investigator"),
]
