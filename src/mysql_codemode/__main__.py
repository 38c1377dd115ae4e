from mysql_codemode.cli import main

if __name__ == "__main__":
    main()
