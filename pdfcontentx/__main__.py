from pdfcontentx.cli import main

main()
