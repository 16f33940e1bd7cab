"""List the Gemini models available to the configured API key."""
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent / ".env.local"
load_dotenv(env_path)

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from google import genai

from src.config.settings import MissingCredentialError, require_gemini_key, settings


def main() -> int:
    try:
        api_key = require_gemini_key(settings)
    except MissingCredentialError as e:
        print(f"❌ {e}")
        return 1

    client = genai.Client(api_key=api_key)

    print("=" * 70)
    print("Available Gemini models")
    print("=" * 70)
    for model in client.models.list():
        marker = "*" if model.name and model.name.endswith(settings.gemini_model) else " "
        print(f"{marker} {model.name}")
    print()
    print(f"Configured model: {settings.gemini_model}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
