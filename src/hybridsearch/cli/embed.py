"""CLI command for inspecting synthesized embeddings."""

from ..embeddings import VectorSynthesizer, l2_norm, string_hash
from .output import print_json


def embed_command(text: str, show: int, output_json: bool):
    """Print dimension, norm and leading components of a text's embedding.

    Args:
        text: Text to embed
        show: Number of leading components to print (all in JSON mode if 0)
        output_json: If True, output JSON format
    """
    vector = VectorSynthesizer().embed(text)
    norm = l2_norm(vector)

    if output_json:
        print_json("success", data={
            "text": text,
            "hash": string_hash(text),
            "dimensions": len(vector),
            "norm": norm,
            "vector": list(vector[:show]) if show else list(vector),
        })
        return

    print(f"Text:       {text!r}")
    print(f"Hash:       {string_hash(text)}")
    print(f"Dimensions: {len(vector)}")
    print(f"Norm:       {norm:.6f}")
    if show:
        leading = ", ".join(f"{v:+.6f}" for v in vector[:show])
        print(f"First {min(show, len(vector))}:   [{leading}]")
