"""Shell snippets for apps that are set up by hand.

Each builder returns independent blocks that the page renders as
separate copyable steps. The model ID is interpolated as-is: the text
is only shown to the user and never executed here.
"""

from local_apps.models.model_data import ModelData


def llamacpp_snippet(model: ModelData) -> list[str]:
    return [
        """
## Install and build llama.cpp with curl support
git clone https://github.com/ggerganov/llama.cpp.git
cd llama.cpp
LLAMA_CURL=1 make
""",
        f"""## Load and run the model
./main \\
	--hf-repo "{model.id}" \\
	-m file.gguf \\
	-p "I believe the meaning of life is" \\
	-n 128""",
    ]


def ollama_snippet(model: ModelData) -> list[str]:
    return [
        """
## Install with one command:
curl -fsSL https://ollama.com/install.sh | sh
""",
        f"""## Load and run the model
ollama run hf.co/{model.id}""",
    ]


def vllm_snippet(model: ModelData) -> list[str]:
    """Docker-based vLLM deployment serving the model over an OpenAI-compatible API.

    Gated models need access granted on the hub and a token exported as
    HF_TOKEN before running the first block.
    """
    return [
        f"""
## Deploy with docker (needs Docker installed):
docker run --runtime nvidia --gpus all \\
    --name my_vllm_container \\
    -v ~/.cache/huggingface:/root/.cache/huggingface \\
    --env "HUGGING_FACE_HUB_TOKEN=$HF_TOKEN" \\
    -p 8000:8000 \\
    --ipc=host \\
    vllm/vllm-openai:latest \\
    --model {model.id}
""",
        "## Load and run the model\n"
        'docker exec -it my_vllm_container bash -c "python -m vllm.entrypoints.openai.api_server '
        f'--model {model.id} --dtype auto --api-key token-abc123"',
    ]
