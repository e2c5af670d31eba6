class InternalURIs:
    API = "/api"
    EVALUATE = API + "/evaluate"
    HEALTHZ = "/healthz"


class ExternalURIs:
    SEPOLIA_TX = "https://sepolia.etherscan.io/tx/"
