"""Example: Transcribe an audio file using the CompactifAI client."""

import asyncio
import sys

from compactifai import ApiError, create_client


async def main(audio_path: str):
    """Transcribe the given audio file and print the text."""
    client = create_client()

    print(f"Transcribing {audio_path}...")
    try:
        transcript = await client.transcribe_file(audio_path, language="en")
    except ApiError as e:
        print(f"Transcription failed ({e.status_code}): {e.response_body}")
        return

    print("\nTranscript:")
    print(transcript)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python transcribe_example.py <audio_file>")
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
