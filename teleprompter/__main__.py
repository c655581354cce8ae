from teleprompter.app import main

main()
