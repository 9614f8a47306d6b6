"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Google Gemini (from env)
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "").strip()
GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash").strip() or "gemini-2.0-flash"
GEMINI_API_BASE: str = (
    os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta").strip().rstrip("/")
    or "https://generativelanguage.googleapis.com/v1beta"
)

# API timeout (seconds) for the generateContent call
GEMINI_API_TIMEOUT: float = float(os.getenv("GEMINI_API_TIMEOUT", "60"))

# CORS: single allowed origin, or "*" for any
FRONTEND_URL: str = os.getenv("FRONTEND_URL", "").strip() or "*"

# HTTP listener
PORT: int = int(os.getenv("PORT", "3000"))

# Conversation
SYSTEM_PROMPT: str = "You are a helpful AI assistant."
LIVENESS_TEXT: str = "AI Chatbot Backend is Running!"

# User-facing replies when the provider cannot produce an answer
NO_RESPONSE_REPLY: str = "No response generated."
UNAVAILABLE_REPLY: str = "AI is currently unavailable. Please try again later."
