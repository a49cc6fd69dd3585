#!/usr/bin/env python
"""
Helper script to build and verify the canvas-client package.
"""
import glob
import os
import shutil
import subprocess
import sys

def main():
    """Build the wheel and sdist."""
    print("Building package...")

    # Clean previous builds
    for dir_name in ['build', 'dist'] + glob.glob('*.egg-info'):
        if os.path.isdir(dir_name):
            print(f"Cleaning {dir_name}...")
            shutil.rmtree(dir_name)

    try:
        subprocess.check_call([sys.executable, "-m", "build", "--wheel", "--sdist"],
                            cwd=os.getcwd())
        print("\n✓ Package built successfully!")
        print("\nTo install locally:")
        print("  pip install dist/canvas_client-*.whl")
        print("\nOr in development mode:")
        print("  pip install -e .[dev]")
    except subprocess.CalledProcessError as e:
        print(f"\n✗ Build failed: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
