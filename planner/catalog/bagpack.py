from typing import Tuple

from ..logic.contracts import PlanStep
from .builders import input_field, select_field

EMERGENCY_BAGPACK_STEPS: Tuple[PlanStep, ...] = (
    PlanStep(
        id=1,
        title="Basic Bagpack Information",
        fields=(
            input_field(
                "Number of People", "peopleCount",
                input_type="number", min=1, max=10, placeholder="e.g., 2",
            ),
            select_field("Mobility Requirements", "mobilityNeeds", [
                ("high", "High mobility (Need to move quickly)"),
                ("medium", "Medium mobility (Can carry moderate weight)"),
                ("low", "Low mobility (Limited carrying capacity)"),
            ]),
            select_field("Duration Plan", "duration", [
                ("24h", "24 hours"),
                ("48h", "48 hours"),
                ("72h", "72 hours (Recommended)"),
                ("96h", "96 hours"),
            ]),
        ),
    ),
    PlanStep(
        id=2,
        title="Essential Documents",
        fields=(
            select_field("Document Storage Method", "documentStorage", [
                ("physical", "Physical copies only"),
                ("digital", "Digital copies only"),
                ("both", "Both physical and digital"),
            ]),
            select_field("Identity Documents", "identityDocs", [
                ("basic", "Basic (ID, passport)"),
                ("extended", "Extended (+ birth certificates, SSN)"),
                ("comprehensive", "Comprehensive (+ property documents)"),
            ]),
            select_field("Financial Documents", "financialDocs", [
                ("minimal", "Minimal (Cash, main credit card)"),
                ("essential", "Essential (+ insurance info)"),
                ("complete", "Complete (+ account details, contracts)"),
            ]),
        ),
    ),
    PlanStep(
        id=3,
        title="Medical and First Aid",
        fields=(
            select_field("Medical Conditions", "medicalConditions", [
                ("none", "No specific conditions"),
                ("basic", "Basic medical needs"),
                ("chronic", "Chronic conditions"),
                ("multiple", "Multiple conditions"),
            ]),
            select_field("First Aid Kit Level", "firstAidLevel", [
                ("basic", "Basic kit"),
                ("intermediate", "Intermediate kit"),
                ("advanced", "Advanced kit"),
            ]),
            select_field("Prescription Medications", "medications", [
                ("none", "No medications needed"),
                ("basic", "1-2 medications"),
                ("multiple", "Multiple medications"),
            ]),
        ),
    ),
    PlanStep(
        id=4,
        title="Survival Essentials",
        fields=(
            select_field("Water Storage", "waterStorage", [
                ("bottles", "Water bottles"),
                ("containers", "Water containers"),
                ("both", "Both + filtration system"),
            ]),
            select_field("Food Type", "foodType", [
                ("ready-to-eat", "Ready-to-eat meals"),
                ("dehydrated", "Dehydrated food"),
                ("mixed", "Mixed types"),
            ]),
            select_field("Emergency Tools", "tools", [
                ("basic", "Basic (flashlight, multi-tool)"),
                ("intermediate", "+ Radio, batteries"),
                ("advanced", "+ Navigation, advanced tools"),
            ]),
        ),
    ),
    PlanStep(
        id=5,
        title="Additional Considerations",
        fields=(
            select_field("Climate Preparation", "climate", [
                ("warm", "Warm climate gear"),
                ("cold", "Cold climate gear"),
                ("variable", "Variable weather gear"),
            ]),
            select_field("Communication Devices", "communication", [
                ("basic", "Basic (Phone + charger)"),
                ("intermediate", "+ Backup battery"),
                ("advanced", "+ Emergency radio, satellite device"),
            ]),
            select_field("Special Items", "specialItems", [
                ("none", "No special items"),
                ("children", "Children supplies"),
                ("pets", "Pet supplies"),
                ("both", "Both children and pet supplies"),
            ]),
        ),
    ),
)
