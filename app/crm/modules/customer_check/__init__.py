"""
Customer check module.

Confirmation page shown after a customer record was updated:
- Fetch one customer from the backend API by id
- Render a success banner plus a detail card, or an error notice
"""
