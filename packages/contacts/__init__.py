"""
Contacts package - forwards contact, waitlist and invoice orders to the CRM.

This package integrates with:
- Brevo: contact creation through the v3 contacts API
"""
