"""Structured reports returned by the image analysis service.

Field names follow the JSON the model is asked to produce (camelCase on the
wire, snake_case in Python).
"""
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

class ImageCategory(str, Enum):
    NETWORK_DIAGRAM = "NETWORK_DIAGRAM"
    FRUIT = "FRUIT"
    PULSES = "PULSES"
    INVOICE = "INVOICE"
    OTHER = "OTHER"
    UNKNOWN = "UNKNOWN"

class GeneralCategory(str, Enum):
    LOGO = "LOGO"
    GENERIC = "GENERIC"
    CELEBRITY = "CELEBRITY"
    COOKED_FOOD = "COOKED_FOOD"
    ELECTRONIC_ITEM = "ELECTRONIC_ITEM"
    PLANT = "PLANT"
    ANIMAL = "ANIMAL"
    SCENE = "SCENE"
    MANMADE_OBJECT = "MANMADE_OBJECT"

class ReportModel(BaseModel):
    confidence: Optional[str] = None # "High", "Medium" or "Low"

    class Config:
        alias_generator = to_camel
        populate_by_name = True

# --- Network diagrams ---

class NetworkDevice(ReportModel):
    id: str
    type: str
    name: str
    details: str

class NetworkConnection(ReportModel):
    from_: str = Field(alias="from")
    to: str
    protocol: str

class NetworkDiagramReport(ReportModel):
    category: Literal["NETWORK_DIAGRAM"] = "NETWORK_DIAGRAM"
    summary: str
    devices: List[NetworkDevice]
    connections: List[NetworkConnection]
    terraform_code: str

# --- Produce ---

class FruitReport(ReportModel):
    category: Literal["FRUIT"] = "FRUIT"
    fruit_name: str
    description: str
    calories: float
    sugar: float
    vitamins: List[str]
    freshness: str
    shelf_life: str
    analysis_disclaimer: str

class PulseIdentification(ReportModel):
    type: str
    variety: str
    estimated_size_weight: str

class PulseQualityAssessment(ReportModel):
    observed_foreign_matter: str
    defects_damage_percentage: str
    uniformity_of_size: str
    estimated_moisture_level: str

class PulseNutritionFacts(ReportModel):
    estimated_protein: str
    estimated_fiber: str
    estimated_carbs: str
    estimated_calories: str
    key_minerals_vitamins: str

class PulseReport(ReportModel):
    category: Literal["PULSES"] = "PULSES"
    pulse_name: str
    description: str
    identification: PulseIdentification
    quality_purity_assessment: PulseQualityAssessment
    overall_quality_assessment: str
    key_nutrition_facts_per_100g: PulseNutritionFacts = Field(alias="keyNutritionFactsPer100g")
    analysis_disclaimer: str

# --- Invoices ---

class InvoiceLineItem(ReportModel):
    description: str
    quantity: float
    unit_price: float
    total_price: float

class InvoiceReport(ReportModel):
    category: Literal["INVOICE"] = "INVOICE"
    vendor_name: str
    invoice_date: str
    total_amount: float
    tax_amount: Optional[float] = None
    line_items: List[InvoiceLineItem]
    currency: str # ISO 4217 code

# --- Everything else, sub-classified ---

class LogoReport(ReportModel):
    category: Literal["OTHER"] = "OTHER"
    sub_category: Literal["LOGO"] = "LOGO"
    company_name: str
    product_name: Optional[str] = None
    description: str
    industry: str
    website: Optional[str] = None

class CelebrityReport(ReportModel):
    category: Literal["OTHER"] = "OTHER"
    sub_category: Literal["CELEBRITY"] = "CELEBRITY"
    name: str
    known_for: str
    biography: str
    notable_works: List[str]
    official_website: Optional[str] = None

class NutritionEstimate(ReportModel):
    calories: float
    protein: float
    carbs: float
    fat: float

class CookedFoodReport(ReportModel):
    category: Literal["OTHER"] = "OTHER"
    sub_category: Literal["COOKED_FOOD"] = "COOKED_FOOD"
    dish_name: str
    estimated_ingredients: List[str]
    nutrition_estimate: NutritionEstimate
    cooking_process: List[str]
    allergen_alert: List[str] = Field(default_factory=list)

class GenericReport(ReportModel):
    category: Literal["OTHER"] = "OTHER"
    sub_category: Literal[
        "GENERIC",
        "ELECTRONIC_ITEM",
        "PLANT",
        "ANIMAL",
        "SCENE",
        "MANMADE_OBJECT",
    ] = "GENERIC"
    description: str
    tags: List[str]
    details: Optional[List[str]] = None

AnalysisReport = Union[
    NetworkDiagramReport,
    FruitReport,
    PulseReport,
    InvoiceReport,
    LogoReport,
    CelebrityReport,
    CookedFoodReport,
    GenericReport,
]

# --- Tagged results of one classification request ---

class AnalysisSuccess(BaseModel):
    kind: Literal["success"] = "success"
    category: ImageCategory
    report: AnalysisReport

class RateLimited(BaseModel):
    kind: Literal["rate_limited"] = "rate_limited"
    message: str

class AnalysisFailed(BaseModel):
    kind: Literal["failed"] = "failed"
    message: str

class UnknownCategory(BaseModel):
    kind: Literal["unknown_category"] = "unknown_category"
    message: str

ClassificationResult = Annotated[
    Union[AnalysisSuccess, RateLimited, AnalysisFailed, UnknownCategory],
    Field(discriminator="kind"),
]
