"""Prompts and response schemas sent to the Gemini generateContent endpoint."""

CLASSIFY_PROMPT = (
    'Analyze the image and classify it into one of the following categories: "NETWORK_DIAGRAM", '
    '"FRUIT", "PULSES", "INVOICE", or "OTHER". If the image cannot be made out at all, respond '
    '"UNKNOWN". Respond with only the category name.'
)

SUB_CLASSIFY_PROMPT = (
    "Is the main subject of this image a known celebrity, a company or product logo, a cooked food "
    "dish, an electronic item, a plant, an animal, a general scene, or a manmade object? Respond with "
    'only "CELEBRITY", "LOGO", "COOKED_FOOD", "ELECTRONIC_ITEM", "PLANT", "ANIMAL", "SCENE", or '
    '"MANMADE_OBJECT".'
)

_CONFIDENCE = {"type": "STRING", "description": "Confidence level (High, Medium, Low)."}

def _string(description=None, nullable=False):
    schema = {"type": "STRING"}
    if description:
        schema["description"] = description
    if nullable:
        schema["nullable"] = True
    return schema

def _number(description=None, nullable=False):
    schema = {"type": "NUMBER"}
    if description:
        schema["description"] = description
    if nullable:
        schema["nullable"] = True
    return schema

def _string_list(nullable=False):
    schema = {"type": "ARRAY", "items": {"type": "STRING"}}
    if nullable:
        schema["nullable"] = True
    return schema

def _object(properties, required):
    return {"type": "OBJECT", "properties": properties, "required": required}

NETWORK_DIAGRAM_PROMPT = (
    "Analyze this network diagram. Identify all devices, their connections, and provide a summary. "
    "For each device and connection, provide a confidence level ('High', 'Medium', 'Low') based on how "
    "clearly it is depicted in the diagram. Also, generate a basic Terraform HCL configuration for the "
    "identified infrastructure. The Terraform HCL code must be well-formatted with proper indentation "
    "and newlines to ensure readability. Respond in JSON format."
)

NETWORK_DIAGRAM_SCHEMA = _object(
    {
        "summary": _string("A brief overview of the network topology."),
        "devices": {
            "type": "ARRAY",
            "items": _object(
                {
                    "id": _string(),
                    "type": _string(),
                    "name": _string(),
                    "details": _string(),
                    "confidence": _CONFIDENCE,
                },
                ["id", "type", "name", "details"],
            ),
        },
        "connections": {
            "type": "ARRAY",
            "items": _object(
                {
                    "from": _string(),
                    "to": _string(),
                    "protocol": _string(),
                    "confidence": _CONFIDENCE,
                },
                ["from", "to", "protocol"],
            ),
        },
        "terraformCode": _string("Well-formatted Terraform HCL code."),
    },
    ["summary", "devices", "connections", "terraformCode"],
)

FRUIT_PROMPT = (
    "Act as an expert produce inspector. Analyze the fruit, vegetable, or pulse in the image. Provide "
    "its name, description, nutritional info (calories, sugar), and key vitamins. Assess its freshness "
    "and estimate its shelf life from a consumer and vendor perspective. Provide an overall confidence "
    "score ('High', 'Medium', 'Low') for this analysis based on the image quality and clarity. Finally, "
    "include a disclaimer stating that this analysis is based on a static 2D image. Respond in JSON format."
)

FRUIT_SCHEMA = _object(
    {
        "fruitName": _string("The name of the fruit, vegetable, or pulse."),
        "description": _string("A short description."),
        "calories": _number("Estimated calories per 100g."),
        "sugar": _number("Estimated grams of sugar per 100g."),
        "vitamins": _string_list(),
        "freshness": _string("An assessment of the item's freshness and ripeness."),
        "shelfLife": _string("Estimated shelf life from a consumer and vendor perspective."),
        "analysisDisclaimer": _string("A disclaimer about the analysis being based on a static image."),
        "confidence": _CONFIDENCE,
    },
    ["fruitName", "description", "calories", "sugar", "vitamins", "freshness", "shelfLife", "analysisDisclaimer"],
)

PULSES_PROMPT = (
    "Act as an expert agricultural analyst specializing in pulses. Analyze the pulse in the image. "
    "Provide its specific name, type, and variety. Generate a detailed identification, quality & purity "
    "assessment, overall quality assessment, and key nutrition facts (per 100g serving). For quality "
    "assessment, estimate foreign matter, defects/damage percentage, uniformity of size, and moisture "
    "level if visual cues allow. Provide an overall confidence score ('High', 'Medium', 'Low') for this "
    "analysis based on the image quality and clarity. Finally, include a disclaimer stating that this "
    "analysis is based on a static 2D image. Respond in JSON format according to the provided schema."
)

PULSES_SCHEMA = _object(
    {
        "pulseName": _string("The common name of the pulse (e.g., 'Red Lentil', 'Chickpea')."),
        "description": _string("A brief descriptive summary of the pulse."),
        "identification": _object(
            {
                "type": _string("General type (e.g., 'Lentil', 'Bean', 'Pea')."),
                "variety": _string("Specific variety (e.g., 'Masoor Dal', 'Kabuli Chickpea')."),
                "estimatedSizeWeight": _string("Estimated size range or weight per unit."),
            },
            ["type", "variety", "estimatedSizeWeight"],
        ),
        "qualityPurityAssessment": _object(
            {
                "observedForeignMatter": _string(),
                "defectsDamagePercentage": _string(),
                "uniformityOfSize": _string(),
                "estimatedMoistureLevel": _string(),
            },
            ["observedForeignMatter", "defectsDamagePercentage", "uniformityOfSize", "estimatedMoistureLevel"],
        ),
        "overallQualityAssessment": _string("An overall summary of the pulse's quality."),
        "keyNutritionFactsPer100g": _object(
            {
                "estimatedProtein": _string(),
                "estimatedFiber": _string(),
                "estimatedCarbs": _string(),
                "estimatedCalories": _string(),
                "keyMineralsVitamins": _string(),
            },
            ["estimatedProtein", "estimatedFiber", "estimatedCarbs", "estimatedCalories", "keyMineralsVitamins"],
        ),
        "confidence": _CONFIDENCE,
        "analysisDisclaimer": _string("A disclaimer about the analysis being based on a static image."),
    },
    [
        "pulseName", "description", "identification", "qualityPurityAssessment",
        "overallQualityAssessment", "keyNutritionFactsPer100g", "confidence", "analysisDisclaimer",
    ],
)

INVOICE_PROMPT = (
    "Act as a meticulous data entry specialist. Analyze the invoice or bill in the image. Extract the "
    "vendor name, invoice date, total amount, and tax amount. Identify the currency and provide its ISO "
    "4217 code (e.g., USD, EUR, INR). Identify all line items, including their description, quantity, "
    "unit price, and total price. Provide an overall confidence score ('High', 'Medium', 'Low') based on "
    "the clarity of the document. Respond in JSON format."
)

INVOICE_SCHEMA = _object(
    {
        "vendorName": _string(),
        "invoiceDate": _string(),
        "totalAmount": _number(),
        "taxAmount": _number(nullable=True),
        "currency": _string("The ISO 4217 currency code (e.g., USD, EUR, INR)."),
        "lineItems": {
            "type": "ARRAY",
            "items": _object(
                {
                    "description": _string(),
                    "quantity": _number(),
                    "unitPrice": _number(),
                    "totalPrice": _number(),
                },
                ["description", "quantity", "unitPrice", "totalPrice"],
            ),
        },
        "confidence": _CONFIDENCE,
    },
    ["vendorName", "invoiceDate", "totalAmount", "currency", "lineItems"],
)

LOGO_PROMPT = (
    "Act as a brand recognition expert. Analyze the logo in the image. Identify the company and/or "
    "product it represents. Provide details about the company, its industry, and an official website if "
    "possible. Provide an overall confidence score ('High', 'Medium', 'Low') for this analysis. If you "
    "cannot identify the logo, provide your best guess but with a 'Low' confidence. Respond in JSON format."
)

LOGO_SCHEMA = _object(
    {
        "companyName": _string(),
        "productName": _string(nullable=True),
        "description": _string(),
        "industry": _string(),
        "website": _string(nullable=True),
        "confidence": _CONFIDENCE,
    },
    ["companyName", "description", "industry"],
)

CELEBRITY_PROMPT = (
    "Act as a pop culture and biography expert. Analyze the image of the celebrity. Identify them and "
    "provide their name, what they are known for (e.g., profession), a brief biography, a list of a few "
    "notable works (movies, songs, achievements), and an official website if one exists. Provide an "
    "overall confidence score ('High', 'Medium', 'Low'). If you cannot identify the person with high "
    "confidence, state that clearly and provide your best guess with a 'Low' confidence. Respond in JSON format."
)

CELEBRITY_SCHEMA = _object(
    {
        "name": _string(),
        "knownFor": _string("Profession(s) or what the person is known for."),
        "biography": _string(),
        "notableWorks": _string_list(),
        "officialWebsite": _string(nullable=True),
        "confidence": _CONFIDENCE,
    },
    ["name", "knownFor", "biography", "notableWorks"],
)

COOKED_FOOD_PROMPT = (
    "Act as a culinary expert. Analyze the cooked food dish in the image. Identify the dish name, "
    "estimated main ingredients, a nutrition estimate (calories, protein, carbs, fat per typical "
    "serving), a simple cooking process/recipe (step-by-step), and alert for common allergens if visible "
    "or typically present. Provide an overall confidence score ('High', 'Medium', 'Low'). Respond in JSON format."
)

COOKED_FOOD_SCHEMA = _object(
    {
        "dishName": _string(),
        "estimatedIngredients": _string_list(),
        "nutritionEstimate": _object(
            {"calories": _number(), "protein": _number(), "carbs": _number(), "fat": _number()},
            ["calories", "protein", "carbs", "fat"],
        ),
        "cookingProcess": _string_list(),
        "allergenAlert": _string_list(),
        "confidence": _CONFIDENCE,
    },
    ["dishName", "estimatedIngredients", "nutritionEstimate", "cookingProcess"],
)

GENERIC_PROMPT = (
    "Describe the image in detail. Provide a general description and a few relevant tags. Provide an "
    "overall confidence score ('High', 'Medium', 'Low') for your description based on the clarity of "
    "the image. Respond in JSON format."
)

GENERIC_SCHEMA = _object(
    {
        "description": _string(),
        "tags": _string_list(),
        "details": _string_list(nullable=True),
        "confidence": _CONFIDENCE,
    },
    ["description", "tags"],
)
