"""Onboarding package - acknowledges the post-contact onboarding questionnaire."""
