from clientip.cli import main

main()
