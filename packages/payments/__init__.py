"""
Payments package - server boundary for payment intent creation.

This package integrates with:
- Stripe: payment intents and Stripe Tax calculations

Each request is stateless: a new processor-side intent is created per call and
only its client secret is returned. Stripe owns the intent's lifecycle after that.
"""
