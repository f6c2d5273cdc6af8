from dataclasses import dataclass
@dataclass
class Constants:

    CROSSMINT_API_VERSION = "2022-06-09"
    CROSSMINT_DOMAIN = "crossmint.com"
    CROSSMINT_ENVIRONMENTS = ("staging", "production")
    CROSSMINT_API_KEY_HEADER = "x-api-key"

    # Fiat amount is exact, the provider computes the token output
    EXECUTION_MODE_EXACT_IN = "exact-in"
    PAYMENT_METHOD_CHECKOUTCOM_FLOW = "checkoutcom-flow"

    CREATE_ORDER_PATH = "/api/create-order"

    ERROR_MISSING_API_KEY = "Server misconfiguration: CROSSMINT_SERVER_SIDE_API_KEY missing"
    ERROR_ORDER_FAILED = "Failed to create order"
    ERROR_ORDER_UNEXPECTED = "Unexpected error creating order"

    # Checkout UI steps
    STEP_OPTIONS = "options"
    STEP_PROCESSING = "processing"
    STEP_COMPLETED = "completed"
