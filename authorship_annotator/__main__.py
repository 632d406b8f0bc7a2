"""Package entry point for ``python -m authorship_annotator``.

WHY: Users run the annotator as ``python -m authorship_annotator Main.java``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

if __name__ == "__main__":
    from authorship_annotator.cli import main
    main()
