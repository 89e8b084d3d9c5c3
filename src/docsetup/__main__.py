from docsetup.cli.setup_docs import main

if __name__ == "__main__":
    main()
