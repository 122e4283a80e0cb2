"""Document-to-analysis pipeline."""

from lexguard.analysis.capabilities import select_capabilities
from lexguard.analysis.client_base import BaseAnalysisClient
from lexguard.analysis.exceptions import EmptyDocumentError, UnsupportedLanguageError
from lexguard.analysis.invoker import TieredInvoker
from lexguard.analysis.models import AnalysisResult, Language
from lexguard.analysis.request_builder import RequestBuilder
from lexguard.documents.models import Document
from lexguard.extraction.content_extractor import ContentExtractor
from lexguard.logging.logger import Log


class Analyzer:
    """Produces a structured legal-risk report for one document.

    Pipeline: credentials -> extract content -> select capabilities ->
    build requests -> tiered invocation -> decode.
    """

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        timeout_seconds: float,
        content_extractor: ContentExtractor | None = None,
        request_builder: RequestBuilder | None = None,
    ) -> None:
        self._client = client
        self._content_extractor = content_extractor or ContentExtractor()
        self._request_builder = request_builder or RequestBuilder()
        self._invoker = TieredInvoker(client, timeout_seconds)

    async def analyze(
        self,
        document: Document,
        language: Language | str,
        deep_analysis: bool = False,
    ) -> AnalysisResult:
        """Analyze a document and return the validated result.

        Raises:
            MissingCredentialsError: before any remote call if no key is set.
            UnsupportedLanguageError: if ``language`` is not en, ru or kz.
            EmptyDocumentError: if the document has no bytes.
            AnalysisExhaustedError: if every tier failed.
        """
        lang = self._resolve_language(language)
        self._client.ensure_configured()
        if document.size == 0:
            raise EmptyDocumentError(f"Document {document.name} is empty")
        Log.info(
            f"Analyzing {document.name} ({document.size} bytes)",
            language=lang.value,
            deep_analysis=deep_analysis,
        )

        # Step 1: Extract content
        content = self._content_extractor.extract(document)

        # Step 2: Build one request per capability tier
        profile = select_capabilities(deep_analysis)
        requests = self._request_builder.build(
            content, lang, profile, document_name=document.name
        )

        # Step 3: Invoke until one tier yields a valid result
        result = await self._invoker.run(requests)
        Log.info(
            f"Analysis complete: {len(result.risks)} risks, verdict {result.verdict.value}"
        )
        return result

    @staticmethod
    def _resolve_language(language: Language | str) -> Language:
        try:
            return Language(language)
        except ValueError:
            supported = [lang.value for lang in Language]
            raise UnsupportedLanguageError(
                f"Unsupported language '{language}'. Choose from: {supported}"
            ) from None
