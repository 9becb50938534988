"""
Gemini LLM client for LangChain integration.

This client provides only the basic invoke functionality without any domain knowledge.
Prompts are built in the Use Case layer.
"""

from typing import Optional

from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI

from app.application.ports import LLMServicePort
from app.infra.config.logging_config import get_logger


class GeminiClient(LLMServicePort):
    """
    Infrastructure-layer LLM client providing pure invoke functionality.

    Returns the full completion; no streaming.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-2.5-flash",
        temperature: float = 0.7,
        max_retries: int = 0,
        timeout: Optional[float] = 60.0,
        **kwargs,
    ):
        """Initialize the Gemini chat model."""
        self.model_name = model_name
        self.llm = ChatGoogleGenerativeAI(
            model=model_name,
            google_api_key=api_key,
            temperature=temperature,
            max_retries=max_retries,
            timeout=timeout,
            **kwargs,
        )
        self._chain = self.llm | StrOutputParser()
        self._log = get_logger("infra.llm")

    async def invoke_text(self, prompt: str) -> str:
        """
        Invoke the model with a single user prompt and return the text reply.

        Args:
            prompt: Fully rendered prompt text

        Returns:
            Raw text response from the model
        """
        text = await self._chain.ainvoke(prompt)
        self._log.info(
            "llm.invoke.text",
            model=self.model_name,
            prompt_len=len(prompt),
            response_len=len(text),
        )
        return text
