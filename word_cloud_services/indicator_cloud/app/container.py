""" Application level dependency container
"""

from dependency_injector import containers, providers

from word_cloud_services.common.core import RequestClient
from word_cloud_services.common.models.data_models import RelatedWords, WordFrequency

from .rpc import FrequencyService, SynonymService
from .service import (EnrichmentClient, IndicatorCloudService,
                      WordCloudImageRenderer, WordExtractor)
from .service.lexical import WordNetVerbClassifier


async def make_request_client(headers, cookies, request_timeout):
    async with RequestClient(headers=headers,
                             cookies=cookies,
                             request_timeout=request_timeout) as client:
        yield client


class ResourceContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    # required resources for services
    http_request_client = providers.Resource(
        make_request_client,
        headers=config.headers,
        cookies=config.cookies,
        request_timeout=config.request_timeout
    )


class RPCServiceContainer(containers.DeclarativeContainer):
    config = providers.Configuration()
    resources = providers.DependenciesContainer()

    synonym_service = providers.Singleton(
        SynonymService,
        remote_service_endpoint=config.synonym_service,
        request_client=resources.http_request_client,
        response_model=RelatedWords
    )

    frequency_service = providers.Singleton(
        FrequencyService,
        remote_service_endpoint=config.frequency_service,
        request_client=resources.http_request_client,
        response_model=WordFrequency,
        max_concurrency=config.max_concurrency
    )


class ServiceContainer(containers.DeclarativeContainer):
    config = providers.Configuration()
    rpc_services = providers.DependenciesContainer()

    word_extractor = providers.Singleton(WordExtractor)

    enrichment_client = providers.Singleton(
        EnrichmentClient,
        synonym_service=rpc_services.synonym_service,
        frequency_service=rpc_services.frequency_service
    )

    render_adapter = providers.Singleton(WordCloudImageRenderer)

    verb_classifier = providers.Singleton(WordNetVerbClassifier)

    indicator_cloud_service = providers.Singleton(
        IndicatorCloudService,
        extractor=word_extractor,
        enrichment_client=enrichment_client,
        render_adapter=render_adapter,
        cloud_specs=config.clouds,
        dataset_path=config.dataset.path,
        text_field=config.dataset.text_field,
        credential=config.credentials.wordnik_api_key,
        part_of_speech_classifiers=providers.Dict(verb=verb_classifier)
    )


class Application(containers.DeclarativeContainer):
    """Application dependency container

    Containers:
        resources,
        rpc_services,
        services
    """

    config = providers.Configuration()

    resources = providers.Container(
        ResourceContainer,
        config=config.http,
    )

    rpc_services = providers.Container(
        RPCServiceContainer,
        resources=resources,
        config=config.rpc
    )

    services = providers.Container(
        ServiceContainer,
        config=config,
        rpc_services=rpc_services)
