from hooklog.cli.main import main


main()
