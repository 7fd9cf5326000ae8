"""Pipeline task categories used to classify models and apps."""

from enum import Enum


class PipelineType(str, Enum):
    """Task categories of the model hub taxonomy."""

    # NLP
    TEXT_CLASSIFICATION = "text-classification"
    TOKEN_CLASSIFICATION = "token-classification"
    TABLE_QUESTION_ANSWERING = "table-question-answering"
    QUESTION_ANSWERING = "question-answering"
    ZERO_SHOT_CLASSIFICATION = "zero-shot-classification"
    TRANSLATION = "translation"
    SUMMARIZATION = "summarization"
    FEATURE_EXTRACTION = "feature-extraction"
    TEXT_GENERATION = "text-generation"
    TEXT2TEXT_GENERATION = "text2text-generation"
    FILL_MASK = "fill-mask"
    SENTENCE_SIMILARITY = "sentence-similarity"

    # Audio
    TEXT_TO_SPEECH = "text-to-speech"
    TEXT_TO_AUDIO = "text-to-audio"
    AUTOMATIC_SPEECH_RECOGNITION = "automatic-speech-recognition"
    AUDIO_TO_AUDIO = "audio-to-audio"
    AUDIO_CLASSIFICATION = "audio-classification"
    VOICE_ACTIVITY_DETECTION = "voice-activity-detection"

    # Computer vision
    DEPTH_ESTIMATION = "depth-estimation"
    IMAGE_CLASSIFICATION = "image-classification"
    OBJECT_DETECTION = "object-detection"
    IMAGE_SEGMENTATION = "image-segmentation"
    TEXT_TO_IMAGE = "text-to-image"
    IMAGE_TO_TEXT = "image-to-text"
    IMAGE_TO_IMAGE = "image-to-image"
    IMAGE_TO_VIDEO = "image-to-video"
    UNCONDITIONAL_IMAGE_GENERATION = "unconditional-image-generation"
    VIDEO_CLASSIFICATION = "video-classification"
    ZERO_SHOT_IMAGE_CLASSIFICATION = "zero-shot-image-classification"
    MASK_GENERATION = "mask-generation"
    ZERO_SHOT_OBJECT_DETECTION = "zero-shot-object-detection"
    TEXT_TO_3D = "text-to-3d"
    IMAGE_TO_3D = "image-to-3d"
    IMAGE_FEATURE_EXTRACTION = "image-feature-extraction"

    # Multimodal
    TEXT_TO_VIDEO = "text-to-video"
    VISUAL_QUESTION_ANSWERING = "visual-question-answering"
    DOCUMENT_QUESTION_ANSWERING = "document-question-answering"

    # Tabular
    TABULAR_CLASSIFICATION = "tabular-classification"
    TABULAR_REGRESSION = "tabular-regression"
    TIME_SERIES_FORECASTING = "time-series-forecasting"

    # Other
    REINFORCEMENT_LEARNING = "reinforcement-learning"
    ROBOTICS = "robotics"
    GRAPH_MACHINE_LEARNING = "graph-ml"
    OTHER = "other"
