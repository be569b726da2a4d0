"""
Quick Test Script

Runs a minimal offline check that the client is installed and wired up,
without contacting the Trello API. Good for checking installation.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))


def check_imports():
    """Check that all modules can be imported."""
    print("Checking imports...")
    
    from trello_client.config import config
    print("  [OK] config")
    
    from trello_client.log import setup_logging
    print("  [OK] log")
    
    from trello_client.api.arguments import Arguments
    print("  [OK] api.arguments")
    
    from trello_client.api.decode import decode
    print("  [OK] api.decode")
    
    from trello_client.api.client import Client
    print("  [OK] api.client")
    
    print("\nAll imports successful!")
    return True


def check_stubbed_request():
    """Send one GET through a stub transport and decode the reply."""
    print("\nChecking a stubbed request...")
    
    import httpx
    from trello_client import Arguments, Client
    
    seen = []
    
    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": "abc", "name": "Roadmap"})
    
    with httpx.Client(transport=httpx.MockTransport(handler)) as http_client:
        client = Client("k", "t", http_client=http_client)
        board = client.get("boards/abc", Arguments(fields="name"))
    
    print(f"  [OK] Requested {seen[0].url.path}")
    print(f"  [OK] Decoded board '{board['name']}'")
    
    return True


def main():
    """Run all quick checks."""
    print("=" * 50)
    print("Trello Client - Quick Test")
    print("=" * 50)
    
    try:
        check_imports()
        check_stubbed_request()
        
        print("\n" + "=" * 50)
        print("All checks passed! [OK]")
        print("=" * 50)
        
    except Exception as e:
        print(f"\n[FAIL] Check failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
