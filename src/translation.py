"""Translation through a chat completion api."""

import logging

import pydantic
import requests

import models
import utils


class TranslationError(Exception):
    """Base class of all translation errors."""


class RequestBuildError(TranslationError):
    """The request could not be built."""


class TransportError(TranslationError):
    """The request could not be sent or no response was received."""


class StatusError(TranslationError):
    """The api responded with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        """Initialise the error.

        Arguments:
            - status_code: the http status code of the response.
        """
        super().__init__(f"Unexpected status code: {status_code}")
        self.status_code: int = status_code


class DecodeError(TranslationError):
    """The response body is not a valid completion response."""


class EmptyResponseError(TranslationError):
    """The response contains no completion choices."""


def translate(text: str, language: str, token: str, config: models.Config) -> str:
    """Translate text to the given language. Blocks until the api responds.

    Arguments:
        - text: the text to translate.
        - language: the language to translate to.
        - token: the api token.
        - config: the bot config (api url, model, timeout).

    Returns:
        The content of the first completion choice, unaltered.

    Raises:
        RequestBuildError: the request could not be serialised.
        TransportError: the request failed on the network level.
        StatusError: the api responded with a status other than 200.
        DecodeError: the response body could not be decoded.
        EmptyResponseError: the response contains no choices.
    """
    logging.debug(f"Translating text: {text}")
    logging.info(f"Target language: {language}")
    try:
        body: str = models.CompletionRequest(
            model=config.model,
            messages=[models.ChatMessage(role="user", content=utils.make_prompt(text, language))]
        ).model_dump_json()
    except ValueError as error:
        raise RequestBuildError(f"Error building request: {error}") from error
    headers: dict[str, str] = {"Content-Type": "application/json",
                               "Authorization": f"Bearer {token}"}
    try:
        response: requests.Response = requests.post(url=config.api_url,
                                                    data=body.encode("utf-8"),
                                                    headers=headers,
                                                    timeout=config.request_timeout)
    except requests.RequestException as error:
        raise TransportError(f"Error making request: {error}") from error
    if response.status_code != 200:
        raise StatusError(response.status_code)
    try:
        completion: models.CompletionResponse = models.CompletionResponse.model_validate_json(
            response.content)
    except pydantic.ValidationError as error:
        raise DecodeError(f"Error decoding response: {error}") from error
    if len(completion.choices) == 0:
        raise EmptyResponseError("No translation returned")
    return completion.choices[0].message.content
