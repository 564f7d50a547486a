"""Request descriptors for every endpoint family.

A descriptor is a per-call value object.  Required fields are given to the
constructor and always serialized; optional fields are declared once as
:class:`OptionalField` class attributes, which turns each of them into a fluent
mutator::

    request = ChatCompletionRequest("gpt-4o", messages).temperature(0.2).max_tokens(256)
    request.to_payload()
    # {"model": "gpt-4o", "messages": [...], "temperature": 0.2, "max_tokens": 256}

Mutators do not validate values.  Range checks are left to the remote service.
Once a dispatcher has submitted a descriptor it is sealed and further mutation
raises :class:`DescriptorConsumedError`.
"""
from __future__ import annotations

import os
from typing import Any, Dict, Iterator, Tuple, TypeVar, Union

from .core import JSONValue, accumulate

__all__ = [
    "AssistantRequest",
    "AssistantUpdate",
    "ChatCompletionRequest",
    "CompletionRequest",
    "DescriptorConsumedError",
    "EmbeddingRequest",
    "FileUploadRequest",
    "FineTuneRequest",
    "FineTuningJobRequest",
    "ImageEditRequest",
    "ImageGenerationRequest",
    "ImageVariationRequest",
    "ListQuery",
    "MessageRequest",
    "MessageUpdate",
    "ModerationRequest",
    "MultipartDescriptor",
    "OptionalField",
    "ProjectRequest",
    "ProjectUpdate",
    "ProjectUserRequest",
    "ProjectUserUpdate",
    "RequestDescriptor",
    "RunRequest",
    "RunUpdate",
    "ThreadRequest",
    "ToolOutputsRequest",
    "TranscriptionRequest",
    "TranslationRequest",
    "VectorStoreFileRequest",
    "VectorStoreRequest",
    "VectorStoreUpdate",
]

PathLike = Union[str, "os.PathLike[str]"]

_D = TypeVar("_D", bound="RequestDescriptor")


class DescriptorConsumedError(RuntimeError):
    """Raised when a descriptor is mutated after it has been submitted."""


class OptionalField:
    """Declares an optional field and exposes it as a chaining mutator."""

    def __init__(self) -> None:
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Any = None) -> Any:
        if instance is None:
            return self
        name = self.name

        def setter(value: JSONValue) -> Any:
            instance._set(name, value)
            return instance

        setter.__name__ = name
        setter.__qualname__ = f"{type(instance).__name__}.{name}"
        return setter


class RequestDescriptor:
    """Generic builder parameterized by declared required and optional fields."""

    required: Tuple[str, ...] = ()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        if len(args) > len(self.required):
            raise TypeError(
                f"{type(self).__name__} takes {len(self.required)} positional field(s) "
                f"but {len(args)} were given"
            )
        values: Dict[str, Any] = dict(zip(self.required, args))
        for name in self.required[len(args):]:
            if name not in kwargs:
                raise TypeError(f"{type(self).__name__} missing required field '{name}'")
            values[name] = kwargs.pop(name)
        self._required = values
        self._optional: Dict[str, Any] = {}
        self._sealed = False
        optional = self.optional_fields()
        for name, value in kwargs.items():
            if name not in optional:
                raise TypeError(f"{type(self).__name__} has no field '{name}'")
            self._set(name, value)

    @classmethod
    def optional_fields(cls) -> Tuple[str, ...]:
        """Names of the declared optional fields in declaration order."""

        seen: Dict[str, None] = {}
        for klass in reversed(cls.__mro__):
            for name, attribute in vars(klass).items():
                if isinstance(attribute, OptionalField):
                    seen[name] = None
        return tuple(seen)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self: _D) -> _D:
        self._sealed = True
        return self

    def _set(self, name: str, value: Any) -> None:
        if self._sealed:
            raise DescriptorConsumedError(
                f"{type(self).__name__} was already submitted; build a new request instead"
            )
        self._optional[name] = value

    def _optional_pairs(self) -> Iterator[Tuple[str, Any]]:
        for name in self.optional_fields():
            yield name, self._optional.get(name)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize required fields plus every optional field that was set."""

        return accumulate(self._required, self._optional_pairs())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_payload()!r})"


class MultipartDescriptor(RequestDescriptor):
    """Descriptor whose ``files`` fields are local paths read at submission."""

    files: Tuple[str, ...] = ()

    def file_paths(self) -> Dict[str, PathLike]:
        payload = self.to_payload()
        return {name: payload[name] for name in self.files if name in payload}

    def text_fields(self) -> Dict[str, Any]:
        return {key: value for key, value in self.to_payload().items() if key not in self.files}


# Completions -----------------------------------------------------------
class ChatCompletionRequest(RequestDescriptor):
    required = ("model", "messages")

    max_tokens = OptionalField()
    temperature = OptionalField()
    top_p = OptionalField()
    n = OptionalField()
    stream = OptionalField()
    stop = OptionalField()
    presence_penalty = OptionalField()
    frequency_penalty = OptionalField()
    logit_bias = OptionalField()
    user = OptionalField()
    tools = OptionalField()
    tool_choice = OptionalField()
    response_format = OptionalField()
    seed = OptionalField()


class CompletionRequest(RequestDescriptor):
    required = ("model", "prompt")

    max_tokens = OptionalField()
    temperature = OptionalField()
    top_p = OptionalField()
    n = OptionalField()
    stream = OptionalField()
    logprobs = OptionalField()
    echo = OptionalField()
    stop = OptionalField()
    presence_penalty = OptionalField()
    frequency_penalty = OptionalField()
    best_of = OptionalField()
    logit_bias = OptionalField()
    suffix = OptionalField()
    user = OptionalField()


class EmbeddingRequest(RequestDescriptor):
    required = ("model", "input")

    encoding_format = OptionalField()
    dimensions = OptionalField()
    user = OptionalField()


class ModerationRequest(RequestDescriptor):
    required = ("input",)

    model = OptionalField()


# Images ----------------------------------------------------------------
class ImageGenerationRequest(RequestDescriptor):
    required = ("prompt",)

    model = OptionalField()
    n = OptionalField()
    quality = OptionalField()
    response_format = OptionalField()
    size = OptionalField()
    style = OptionalField()
    user = OptionalField()


class ImageEditRequest(MultipartDescriptor):
    required = ("image", "prompt")
    files = ("image", "mask")

    mask = OptionalField()
    model = OptionalField()
    n = OptionalField()
    response_format = OptionalField()
    size = OptionalField()
    user = OptionalField()


class ImageVariationRequest(MultipartDescriptor):
    required = ("image",)
    files = ("image",)

    model = OptionalField()
    n = OptionalField()
    response_format = OptionalField()
    size = OptionalField()
    user = OptionalField()


# Audio -----------------------------------------------------------------
class TranscriptionRequest(MultipartDescriptor):
    required = ("file", "model")
    files = ("file",)

    language = OptionalField()
    prompt = OptionalField()
    response_format = OptionalField()
    temperature = OptionalField()


class TranslationRequest(MultipartDescriptor):
    required = ("file", "model")
    files = ("file",)

    prompt = OptionalField()
    response_format = OptionalField()
    temperature = OptionalField()


# Files and fine-tuning -------------------------------------------------
class FileUploadRequest(MultipartDescriptor):
    required = ("file", "purpose")
    files = ("file",)


class FineTuneRequest(RequestDescriptor):
    """Body for the legacy ``/fine-tunes`` endpoint."""

    required = ("training_file",)

    validation_file = OptionalField()
    model = OptionalField()
    n_epochs = OptionalField()
    batch_size = OptionalField()
    learning_rate_multiplier = OptionalField()
    prompt_loss_weight = OptionalField()
    compute_classification_metrics = OptionalField()
    classification_n_classes = OptionalField()
    classification_positive_class = OptionalField()
    classification_betas = OptionalField()
    suffix = OptionalField()


class FineTuningJobRequest(RequestDescriptor):
    required = ("model", "training_file")

    validation_file = OptionalField()
    hyperparameters = OptionalField()
    suffix = OptionalField()
    seed = OptionalField()
    integrations = OptionalField()


# Assistants, threads, runs ---------------------------------------------
class _AssistantFields(RequestDescriptor):
    name = OptionalField()
    description = OptionalField()
    instructions = OptionalField()
    tools = OptionalField()
    tool_resources = OptionalField()
    metadata = OptionalField()
    temperature = OptionalField()
    top_p = OptionalField()
    response_format = OptionalField()


class AssistantRequest(_AssistantFields):
    required = ("model",)


class AssistantUpdate(_AssistantFields):
    model = OptionalField()


class ThreadRequest(RequestDescriptor):
    messages = OptionalField()
    tool_resources = OptionalField()
    metadata = OptionalField()


class MessageRequest(RequestDescriptor):
    required = ("role", "content")

    attachments = OptionalField()
    metadata = OptionalField()


class MessageUpdate(RequestDescriptor):
    metadata = OptionalField()


class RunRequest(RequestDescriptor):
    required = ("assistant_id",)

    model = OptionalField()
    instructions = OptionalField()
    additional_instructions = OptionalField()
    additional_messages = OptionalField()
    tools = OptionalField()
    metadata = OptionalField()
    temperature = OptionalField()
    top_p = OptionalField()
    stream = OptionalField()
    max_prompt_tokens = OptionalField()
    max_completion_tokens = OptionalField()
    truncation_strategy = OptionalField()
    tool_choice = OptionalField()
    parallel_tool_calls = OptionalField()
    response_format = OptionalField()
    # Only honoured by POST /threads/runs.
    thread = OptionalField()
    tool_resources = OptionalField()


class RunUpdate(RequestDescriptor):
    metadata = OptionalField()


class ToolOutputsRequest(RequestDescriptor):
    required = ("tool_outputs",)

    stream = OptionalField()


# Vector stores ---------------------------------------------------------
class VectorStoreUpdate(RequestDescriptor):
    name = OptionalField()
    expires_after = OptionalField()
    metadata = OptionalField()


class VectorStoreRequest(VectorStoreUpdate):
    file_ids = OptionalField()
    chunking_strategy = OptionalField()


class VectorStoreFileRequest(RequestDescriptor):
    required = ("file_id",)

    chunking_strategy = OptionalField()


# Projects --------------------------------------------------------------
class ProjectRequest(RequestDescriptor):
    required = ("name",)

    app_use_case = OptionalField()
    business_website = OptionalField()


class ProjectUpdate(RequestDescriptor):
    required = ("name",)


class ProjectUserRequest(RequestDescriptor):
    required = ("user_id", "role")


class ProjectUserUpdate(RequestDescriptor):
    required = ("role",)


# Query strings ---------------------------------------------------------
class ListQuery(RequestDescriptor):
    """Pagination cursors and filters sent as URL query parameters."""

    limit = OptionalField()
    order = OptionalField()
    after = OptionalField()
    before = OptionalField()
    run_id = OptionalField()
    filter = OptionalField()
    include_archived = OptionalField()

