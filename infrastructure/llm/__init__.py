from .openai_generator import OpenAITextGenerator

__all__ = ['OpenAITextGenerator']
