class BusinessRules:
    MIN_RATING = 1
    MAX_RATING = 5
    # A rating at or above this value counts as a recommendation
    RECOMMEND_THRESHOLD = 4


class ErrorMessages:
    ORDER_REQUIRED = "Select one of your orders with this provider to rate"
    ORDER_MISMATCH = "The selected order does not belong to this manufacturer and provider"
    COMMENT_REQUIRED = "Please write a short review"
