"""
Test suite for LLM drivers and the provider factory.

LangChain clients are patched; no network calls are made.

System role: Verification of model driver contract and error taxonomy
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from sales_agent.configs.llm import LLMSettings
from sales_agent.core.exceptions import ProviderCallError, ProviderConfigError
from sales_agent.core.llm.factory import create_llm_driver, get_provider_name
from sales_agent.core.llm.langchain_driver import (
    LangChainDriver,
    extract_status_code,
    response_text,
    to_langchain_messages,
)


@pytest.fixture
def mock_chat_model() -> MagicMock:
    """Provide LangChain chat model mock."""
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content="Hello there"))
    return model


@pytest.fixture
def mock_embeddings() -> MagicMock:
    """Provide LangChain embeddings mock."""
    embeddings = MagicMock()
    embeddings.aembed_query = AsyncMock(return_value=[0.1, 0.2])
    return embeddings


@pytest.fixture
def driver(mock_chat_model, mock_embeddings) -> LangChainDriver:
    """Provide LangChainDriver over mocks."""
    return LangChainDriver(chat_model=mock_chat_model, embeddings=mock_embeddings)


def make_settings(
    provider: str = "gemini",
    google_api_key: str | None = "test-key",
    aws_region: str | None = "us-east-1",
) -> LLMSettings:
    """Build LLMSettings without reading the environment."""
    return LLMSettings.model_validate({
        "provider": provider,
        "GOOGLE_API_KEY": google_api_key,
        "AWS_REGION": aws_region,
    })


class TestLangChainDriverChat:
    """Test suite for LangChainDriver.chat()."""

    @pytest.mark.asyncio
    async def test_chat_should_prepend_system_and_map_roles(self, driver, mock_chat_model) -> None:
        """Test dict messages become LangChain messages after the system prompt."""
        # Act
        response = await driver.chat(
            "be helpful",
            [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}],
        )

        # Assert
        sent = mock_chat_model.ainvoke.call_args.args[0]
        assert [type(m) for m in sent] == [SystemMessage, HumanMessage, AIMessage]
        assert sent[0].content == "be helpful"
        assert response.content == "Hello there"

    @pytest.mark.asyncio
    async def test_chat_should_flatten_list_content(self, driver, mock_chat_model) -> None:
        """Test multi-part responses are joined into plain text."""
        mock_chat_model.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Hello "}, {"type": "text", "text": "world"}]
        )

        response = await driver.chat("s", [{"role": "user", "content": "hi"}])

        assert response.content == "Hello world"

    @pytest.mark.asyncio
    async def test_chat_should_raise_provider_call_error_on_upstream_failure(
        self, driver, mock_chat_model
    ) -> None:
        """Test client exceptions are wrapped with status code when available."""
        # Arrange
        upstream = RuntimeError("quota exceeded")
        upstream.status_code = 429
        mock_chat_model.ainvoke.side_effect = upstream

        # Act / Assert
        with pytest.raises(ProviderCallError) as exc_info:
            await driver.chat("s", [{"role": "user", "content": "hi"}])
        assert exc_info.value.status_code == 429
        assert exc_info.value.__cause__ is upstream

    @pytest.mark.asyncio
    async def test_chat_should_raise_when_response_has_no_text(self, driver, mock_chat_model) -> None:
        """Test empty model output is a ProviderCallError."""
        mock_chat_model.ainvoke.return_value = AIMessage(content="")

        with pytest.raises(ProviderCallError, match="No content"):
            await driver.chat("s", [{"role": "user", "content": "hi"}])


class TestLangChainDriverEmbed:
    """Test suite for LangChainDriver.embed()."""

    @pytest.mark.asyncio
    async def test_embed_should_return_vector(self, driver) -> None:
        """Test embed returns the embeddings vector."""
        assert await driver.embed("text") == [0.1, 0.2]

    @pytest.mark.asyncio
    async def test_embed_should_raise_on_empty_vector(self, driver, mock_embeddings) -> None:
        """Test a missing vector is a ProviderCallError."""
        mock_embeddings.aembed_query.return_value = []

        with pytest.raises(ProviderCallError):
            await driver.embed("text")


class TestHelpers:
    """Test suite for message and error helpers."""

    def test_to_langchain_messages_should_map_system_role(self) -> None:
        """Test system-role messages stay system messages."""
        messages = to_langchain_messages("s", [{"role": "system", "content": "x"}])

        assert isinstance(messages[1], SystemMessage)

    def test_response_text_should_skip_non_text_parts(self) -> None:
        """Test non-text content parts are ignored."""
        assert response_text(["a", {"type": "image_url"}, {"type": "text", "text": "b"}]) == "ab"

    def test_extract_status_code_should_read_botocore_response(self) -> None:
        """Test botocore-style error responses expose the HTTP status."""
        error = Exception("throttled")
        error.response = {"ResponseMetadata": {"HTTPStatusCode": 429}}

        assert extract_status_code(error) == 429

    def test_extract_status_code_should_return_none_when_unknown(self) -> None:
        """Test plain exceptions have no status."""
        assert extract_status_code(ValueError("x")) is None


class TestFactory:
    """Test suite for create_llm_driver() and get_provider_name()."""

    def test_get_provider_name_should_normalize(self) -> None:
        """Test provider names are case-insensitive."""
        assert get_provider_name(make_settings(provider=" Bedrock ")) == "bedrock"

    def test_create_llm_driver_should_build_gemini(self) -> None:
        """Test gemini provider creates GeminiDriver with configured limits."""
        with patch("sales_agent.core.llm.gemini_driver.ChatGoogleGenerativeAI") as chat_cls, patch(
            "sales_agent.core.llm.gemini_driver.GoogleGenerativeAIEmbeddings"
        ):
            driver = create_llm_driver(make_settings())

        assert driver.provider_name == "gemini"
        kwargs = chat_cls.call_args.kwargs
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_output_tokens"] == 500

    def test_create_llm_driver_should_fall_back_to_gemini_for_unknown_provider(self) -> None:
        """Test unknown providers fall back to Gemini."""
        with patch("sales_agent.core.llm.gemini_driver.ChatGoogleGenerativeAI"), patch(
            "sales_agent.core.llm.gemini_driver.GoogleGenerativeAIEmbeddings"
        ):
            driver = create_llm_driver(make_settings(provider="openai"))

        assert driver.provider_name == "gemini"

    def test_create_llm_driver_should_require_google_api_key(self) -> None:
        """Test Gemini without an API key is a ProviderConfigError."""
        with pytest.raises(ProviderConfigError, match="GOOGLE_API_KEY"):
            create_llm_driver(make_settings(google_api_key=None))

    def test_create_llm_driver_should_build_bedrock(self) -> None:
        """Test bedrock provider creates BedrockDriver when credentials resolve."""
        with patch("sales_agent.core.llm.bedrock_driver.boto3") as boto3_mock, patch(
            "sales_agent.core.llm.bedrock_driver.ChatBedrockConverse"
        ) as chat_cls, patch("sales_agent.core.llm.bedrock_driver.BedrockEmbeddings"):
            boto3_mock.Session.return_value.get_credentials.return_value = MagicMock()

            driver = create_llm_driver(make_settings(provider="bedrock"))

        assert driver.provider_name == "bedrock"
        assert chat_cls.call_args.kwargs["max_tokens"] == 500

    def test_create_llm_driver_should_require_aws_credentials(self) -> None:
        """Test Bedrock without resolvable credentials is a ProviderConfigError."""
        with patch("sales_agent.core.llm.bedrock_driver.boto3") as boto3_mock:
            boto3_mock.Session.return_value.get_credentials.return_value = None

            with pytest.raises(ProviderConfigError, match="credentials"):
                create_llm_driver(make_settings(provider="bedrock"))
