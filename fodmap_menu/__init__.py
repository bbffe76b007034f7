"""
FODMAP menu analyzer:
- prompts: vision request for a menu photo
- gpt_vision: OpenAI chat-completions call
- utils: JSON extraction from free-text model output
- schema: dish assessment model and normalizer
- services: end-to-end menu analysis pipeline
- main: FastAPI application
"""
