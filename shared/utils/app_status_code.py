class AppStatusCode:
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    OPERATION_SUCCESSFUL = "101"

    OPERATION_ERROR = "200"
    OPERATION_FAILED = "201"
    INVALID_INPUT = "202"
    REQUIRED_VALIDATION_ERROR = "203"
    DUPLICATE_ADD_ERROR = "204"
    NOT_FOUND = "205"
    RELATED_RECORDS_EXIST = "206"

    AUTHENTICATION_USER_INVALID = "300"
