"""
Checkout package - plan catalog, pricing and the browser-side checkout flow.

This package integrates with:
- Stripe: payment confirmation with the publishable key and an intent's client secret
- The payment intent and contact endpoints of this service, over HTTP
"""
