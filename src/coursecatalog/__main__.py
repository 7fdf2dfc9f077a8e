from coursecatalog.cli import main

main()
