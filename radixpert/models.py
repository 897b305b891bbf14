"""Model factory for LangChain ChatOpenAI instances."""

from langchain_openai import ChatOpenAI
from pydantic import SecretStr

from radixpert.config import Settings


def get_chat_model(settings: Settings) -> ChatOpenAI:
    return ChatOpenAI(
        model=settings.chat_model,
        api_key=SecretStr(settings.openai_api_key),
        base_url=settings.openai_base_url,
        temperature=settings.chat_temperature,
        timeout=settings.inference_timeout_seconds,
        max_retries=0,
    )
