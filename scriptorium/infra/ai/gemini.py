import google.generativeai as genai
import logging
import re

logger = logging.getLogger(__name__)


class GeminiProvider:
    provider_key = "gemini"

    def __init__(self, api_key: str | None, model: str = "gemini-1.5-flash"):
        self.api_key = api_key
        self.model_name = model
        if api_key:
            genai.configure(api_key=api_key)

    async def generate_poem(self, prompt: str, params: dict) -> str:
        if not self.api_key:
            raise ValueError("Gemini API key is not configured")

        try:
            max_tokens = params.get("max_tokens", 1000)
            logger.info(f"Generating poem with model {self.model_name}, max_output_tokens: {max_tokens}")

            model = genai.GenerativeModel(
                params.get("model", self.model_name),
                system_instruction=params.get("system_prompt"),
            )
            generation_config = genai.types.GenerationConfig(
                candidate_count=1,
                max_output_tokens=max_tokens,
                temperature=params.get("temperature", 0.8),
            )

            response = await model.generate_content_async(prompt, generation_config=generation_config)

            if not response.candidates:
                logger.warning("Gemini returned no candidates")
                return ""

            logger.info(f"Gemini response finish reason: {response.candidates[0].finish_reason}")

            parts = response.candidates[0].content.parts
            text = "".join(part.text for part in parts if getattr(part, "text", None))
            # Clean up potential Markdown artifacts
            text = re.sub(r'```[A-Za-z]*', '', text)
            return text.strip()

        except Exception as e:
            logger.error(f"Error generating content with Gemini: {e}")
            raise
