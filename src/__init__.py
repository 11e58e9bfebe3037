"""
Hair Simulation - Provider Adapters

Backend adapters for the hair simulation app:
1. Transactional email (account verification, password reset) via SendGrid
2. Hairstyle image transformation via the Gemini image model

DESIGN PRINCIPLES:
1. Configuration is passed in, never read from hidden globals at call time
2. Fail early, fail visibly
3. No retries, no silent fallbacks
4. Every provider call is logged
"""

__version__ = "1.0.0"
__author__ = "Hair Simulation Team"
