# Copyright 2026 UCP Authors
# Single command launcher for the deposit checkout

"""
Deposit Checkout Launcher

Usage:
    python run.py --amount 25.00 --email a@b.com --wallet <address>

This script:
1. Starts the order proxy in background
2. Runs one deposit checkout against it
"""

import subprocess
import sys
import os
import time
import atexit

PROXY_PORT = 3000

# Server process reference
server_process = None

def start_server():
    """Start the order proxy in background."""
    global server_process

    print("[*] Starting Order Proxy...")

    server_process = subprocess.Popen(
        [sys.executable, "-m", "app", "serve", "--port", str(PROXY_PORT)],
        env=os.environ.copy(),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        creationflags=subprocess.CREATE_NO_WINDOW if sys.platform == 'win32' else 0
    )

    # Wait for server to start
    time.sleep(2)

    if server_process.poll() is None:
        print(f"[OK] Order Proxy started on http://localhost:{PROXY_PORT}")
        return True
    else:
        print("[ERROR] Failed to start Order Proxy")
        return False

def stop_server():
    """Stop the order proxy."""
    global server_process
    if server_process and server_process.poll() is None:
        print("\n[*] Stopping Order Proxy...")
        server_process.terminate()
        server_process.wait(timeout=5)
        print("[OK] Server stopped")

def run_deposit(args):
    """Run a deposit checkout against the local proxy."""
    print("[*] Starting Deposit Checkout...\n")

    result = subprocess.run(
        [sys.executable, "-m", "app", "deposit",
         "--proxy-url", f"http://localhost:{PROXY_PORT}", *args],
        env=os.environ.copy(),
    )
    return result.returncode

def main():
    print("\n" + "=" * 50)
    print("  Deposit Checkout Launcher")
    print("=" * 50 + "\n")

    # Register cleanup
    atexit.register(stop_server)

    # Start server
    if not start_server():
        print(f"[ERROR] Cannot start proxy. Check if port {PROXY_PORT} is available.")
        return 1

    print()

    try:
        return run_deposit(sys.argv[1:])
    except KeyboardInterrupt:
        print("\n[INFO] Interrupted")
        return 130
    finally:
        stop_server()

if __name__ == "__main__":
    sys.exit(main())
