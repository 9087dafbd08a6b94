"""User-facing message constants.

Messages are stable strings. Diagnostic detail (exception text, offending
ids) travels in ``ServiceError.detail``, never inside these constants.
"""

from __future__ import annotations

# --- Customers ---

CUSTOMER_LISTED_SUCCESS = "Customers listed successfully."
CUSTOMER_LIST_EMPTY = "No customers found."
CUSTOMER_LIST_FAILED = "Customers could not be listed."

CUSTOMER_FOUND_SUCCESS = "Customer found."
CUSTOMER_NOT_FOUND = "Customer not found."
CUSTOMER_GET_FAILED = "Customer could not be retrieved."

CUSTOMER_ADD_SUCCESS = "Customer added successfully."
CUSTOMER_ADD_INVALID_COMPANY = "Customer could not be added: company not found."
CUSTOMER_ADD_ERROR = "Customer could not be added."

CUSTOMER_UPDATED_SUCCESS = "Customer updated successfully."
CUSTOMER_UPDATE_INVALID_COMPANY = "Customer could not be updated: company not found."
CUSTOMER_UPDATED_FAILED = "Customer could not be updated."

CUSTOMER_DELETE_SUCCESS = "Customer deleted successfully."
CUSTOMER_DELETE_ERROR = "Customer could not be deleted."

CUSTOMER_INVALID_INPUT = "Customer data is invalid."

# --- Companies ---

COMPANY_LISTED_SUCCESS = "Companies listed successfully."
COMPANY_LIST_EMPTY = "No companies found."
COMPANY_LIST_FAILED = "Companies could not be listed."

COMPANY_ADD_SUCCESS = "Company added successfully."
COMPANY_ADD_ERROR = "Company could not be added."
COMPANY_INVALID_INPUT = "Company data is invalid."
