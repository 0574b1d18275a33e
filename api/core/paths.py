"""
Logical paths of the dashboard views.

The two listings read each other's rows: customers show invoice totals and
invoices show the customer's name and email.
"""

CUSTOMERS_PATH = "/dashboard/customers"
INVOICES_PATH = "/dashboard/invoices"
