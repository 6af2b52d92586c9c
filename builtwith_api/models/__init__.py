# Models - request and configuration types
from .endpoint import ClientConfig, EndpointCategory, EndpointSpec, RequestParams, ResponseFormat

__all__ = ["ClientConfig", "EndpointCategory", "EndpointSpec", "RequestParams", "ResponseFormat"]
