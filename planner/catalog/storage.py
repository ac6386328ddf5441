from typing import Tuple

from ..logic.contracts import PlanStep
from .builders import input_field, select_field

STORAGE_STEPS: Tuple[PlanStep, ...] = (
    PlanStep(
        id=1,
        title="Basic Storage Information",
        fields=(
            input_field("Number of people to prepare for", "peopleCount", placeholder="e.g., 4"),
            select_field("Storage Duration", "duration", [
                ("3months", "3 months"),
                ("6months", "6 months"),
                ("1year", "1 year"),
            ]),
            select_field("Storage Space Type", "spaceType", [
                ("apartment", "Apartment"),
                ("house", "House"),
                ("basement", "Basement"),
                ("garage", "Garage"),
                ("external", "External Storage Unit"),
            ]),
        ),
    ),
    PlanStep(
        id=2,
        title="Food Storage Requirements",
        fields=(
            select_field("Dietary Restrictions", "dietaryRestrictions", [
                ("none", "No restrictions"),
                ("vegetarian", "Vegetarian"),
                ("vegan", "Vegan"),
                ("gluten-free", "Gluten-free"),
                ("dairy-free", "Dairy-free"),
            ]),
            select_field("Food Storage Method", "storageMethod", [
                ("canned", "Canned Foods"),
                ("dried", "Dried Foods"),
                ("frozen", "Frozen Foods"),
                ("mixed", "Mixed Methods"),
            ]),
            select_field("Storage Temperature Control", "temperatureControl", [
                ("room-temp", "Room Temperature"),
                ("cool", "Cool Storage"),
                ("refrigerated", "Refrigerated"),
                ("mixed", "Mixed Storage Conditions"),
            ]),
        ),
    ),
    PlanStep(
        id=3,
        title="Water Storage",
        fields=(
            select_field("Water Storage Container Type", "waterContainerType", [
                ("plastic-containers", "Plastic Containers"),
                ("water-barrels", "Water Barrels"),
                ("water-bottles", "Water Bottles"),
                ("mixed", "Mixed Containers"),
            ]),
            select_field("Water Treatment Method", "waterTreatment", [
                ("none", "No Treatment (Sealed Containers)"),
                ("filters", "Water Filters"),
                ("chemical", "Chemical Treatment"),
                ("mixed", "Mixed Methods"),
            ]),
        ),
    ),
    PlanStep(
        id=4,
        title="Additional Supplies",
        fields=(
            select_field("Medical Supplies Level", "medicalSupplies", [
                ("basic", "Basic First Aid"),
                ("intermediate", "Intermediate Medical Supplies"),
                ("advanced", "Advanced Medical Kit"),
            ]),
            select_field("Power Backup", "powerBackup", [
                ("none", "No Power Backup"),
                ("batteries", "Batteries Only"),
                ("generator", "Generator"),
                ("solar", "Solar Power"),
            ]),
            select_field("Hygiene Supplies", "hygieneSupplies", [
                ("basic", "Basic Supplies"),
                ("intermediate", "Intermediate Supplies"),
                ("advanced", "Advanced Supplies"),
            ]),
        ),
    ),
    PlanStep(
        id=5,
        title="Storage Organization",
        fields=(
            select_field("Storage Organization System", "organizationSystem", [
                ("shelves", "Shelving Units"),
                ("containers", "Storage Containers"),
                ("cabinets", "Storage Cabinets"),
                ("mixed", "Mixed Storage Solutions"),
            ]),
            select_field("Inventory Management", "inventoryManagement", [
                ("simple-list", "Simple List"),
                ("spreadsheet", "Spreadsheet"),
                ("app", "Mobile App"),
                ("none", "No System"),
            ]),
            select_field("Rotation Schedule", "rotationSchedule", [
                ("monthly", "Monthly"),
                ("quarterly", "Quarterly"),
                ("biannual", "Bi-annual"),
                ("annual", "Annual"),
            ]),
        ),
    ),
)
