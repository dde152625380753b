"""
Train a suggestion service from external Greek text.

Two sources:
    - a plain UTF-8 text file, one passage per line
    - a Hugging Face dataset, through `datasets.load_dataset`

Both degrade to an empty list when the source can't be read, so the
engine falls back to its bootstrap vocabulary.
"""

from datasets import load_dataset

from .config import DEFAULT_DATASET_SPLIT, DEFAULT_TEXT_FIELD


def load_corpus_file(path):
    """Load non-empty lines from a text file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f if line.strip()]
    except FileNotFoundError:
        print(f"⚠ Corpus file not found: {path}")
        return []
    except (OSError, UnicodeDecodeError) as e:
        print(f"⚠ Error reading corpus {path}: {e}")
        return []

    print(f"✓ Loaded {len(lines)} lines from {path}")
    return lines


def _as_text(value):
    # Token-level datasets store each example as a list of words
    if isinstance(value, (list, tuple)):
        return " ".join(str(token) for token in value if str(token).strip())
    if value is None:
        return ""
    return str(value)


def load_dataset_texts(name, split=DEFAULT_DATASET_SPLIT, text_field=DEFAULT_TEXT_FIELD, limit=None):
    """
    Pull example texts from a Hugging Face dataset.

    Example:
        texts = load_dataset_texts("some-user/greek-corpus", split="train")
        train_service(service, texts)
    """
    print(f"Loading dataset {name} ({split})...")

    try:
        dataset = load_dataset(name, split=split)
    except Exception as e:
        print(f"⚠ Error loading dataset: {e}")
        print("Using bootstrap vocabulary only...")
        return []

    texts = []
    for example in dataset:
        if limit is not None and len(texts) >= limit:
            break
        if text_field not in example:
            print(f"⚠ Field '{text_field}' not found in dataset {name}")
            return []
        text = _as_text(example[text_field])
        if text.strip():
            texts.append(text)

    print(f"✓ Loaded {len(texts)} examples")
    return texts


def train_service(service, texts):
    """Feed every text to the service; returns the number learned."""
    learned = 0
    for text in texts:
        if not text or not text.strip():
            continue
        service.learn_from_text(text)
        learned += 1

    print(f"✓ Learned from {learned} texts")
    print(f"  Vocabulary: {service.model.vocabulary_size} words")
    print(f"  Character bigrams: {len(service.model.char_bigrams)}")
    return learned
