"""Section framing, payload decoders and the save image aggregate."""
