"""
Enumerations stored on a payment attempt.

Member values are the canonical text written to the store: the variant name,
except where a variant carries an explicit wire rename (`3d_secure`, `classic`).
`CANONICAL_DEFAULTS` names the variant the reference generation policy always
returns for each enum.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Type


class AttemptStatus(str, Enum):
    """Lifecycle state of a payment attempt."""

    STARTED = "Started"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    ROUTER_DECLINED = "RouterDeclined"
    AUTHENTICATION_PENDING = "AuthenticationPending"
    AUTHENTICATION_SUCCESSFUL = "AuthenticationSuccessful"
    AUTHORIZED = "Authorized"
    AUTHORIZATION_FAILED = "AuthorizationFailed"
    CHARGED = "Charged"
    AUTHORIZING = "Authorizing"
    COD_INITIATED = "CodInitiated"
    VOIDED = "Voided"
    VOID_INITIATED = "VoidInitiated"
    CAPTURE_INITIATED = "CaptureInitiated"
    CAPTURE_FAILED = "CaptureFailed"
    VOID_FAILED = "VoidFailed"
    AUTO_REFUNDED = "AutoRefunded"
    PARTIAL_CHARGED = "PartialCharged"
    PARTIAL_CHARGED_AND_CHARGEABLE = "PartialChargedAndChargeable"
    UNRESOLVED = "Unresolved"
    PENDING = "Pending"
    FAILURE = "Failure"
    PAYMENT_METHOD_AWAITED = "PaymentMethodAwaited"
    CONFIRMATION_AWAITED = "ConfirmationAwaited"
    DEVICE_DATA_COLLECTION_PENDING = "DeviceDataCollectionPending"


class Currency(str, Enum):
    """ISO 4217 currency codes accepted for an attempt."""

    AED = "AED"
    ALL = "ALL"
    AMD = "AMD"
    ANG = "ANG"
    AOA = "AOA"
    ARS = "ARS"
    AUD = "AUD"
    AWG = "AWG"
    AZN = "AZN"
    BAM = "BAM"
    BBD = "BBD"
    BDT = "BDT"
    BGN = "BGN"
    BHD = "BHD"
    BIF = "BIF"
    BMD = "BMD"
    BND = "BND"
    BOB = "BOB"
    BRL = "BRL"
    BSD = "BSD"
    BWP = "BWP"
    BYN = "BYN"
    BZD = "BZD"
    CAD = "CAD"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CRC = "CRC"
    CUP = "CUP"
    CVE = "CVE"
    CZK = "CZK"
    DJF = "DJF"
    DKK = "DKK"
    DOP = "DOP"
    DZD = "DZD"
    EGP = "EGP"
    ETB = "ETB"
    EUR = "EUR"
    FJD = "FJD"
    FKP = "FKP"
    GBP = "GBP"
    GEL = "GEL"
    GHS = "GHS"
    GIP = "GIP"
    GMD = "GMD"
    GNF = "GNF"
    GTQ = "GTQ"
    GYD = "GYD"
    HKD = "HKD"
    HNL = "HNL"
    HRK = "HRK"
    HTG = "HTG"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    IQD = "IQD"
    JMD = "JMD"
    JOD = "JOD"
    JPY = "JPY"
    KES = "KES"
    KGS = "KGS"
    KHR = "KHR"
    KMF = "KMF"
    KRW = "KRW"
    KWD = "KWD"
    KYD = "KYD"
    KZT = "KZT"
    LAK = "LAK"
    LBP = "LBP"
    LKR = "LKR"
    LRD = "LRD"
    LSL = "LSL"
    LYD = "LYD"
    MAD = "MAD"
    MDL = "MDL"
    MGA = "MGA"
    MKD = "MKD"
    MMK = "MMK"
    MNT = "MNT"
    MOP = "MOP"
    MRU = "MRU"
    MUR = "MUR"
    MVR = "MVR"
    MWK = "MWK"
    MXN = "MXN"
    MYR = "MYR"
    MZN = "MZN"
    NAD = "NAD"
    NGN = "NGN"
    NIO = "NIO"
    NOK = "NOK"
    NPR = "NPR"
    NZD = "NZD"
    OMR = "OMR"
    PAB = "PAB"
    PEN = "PEN"
    PGK = "PGK"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    PYG = "PYG"
    QAR = "QAR"
    RON = "RON"
    RSD = "RSD"
    RUB = "RUB"
    RWF = "RWF"
    SAR = "SAR"
    SBD = "SBD"
    SCR = "SCR"
    SEK = "SEK"
    SGD = "SGD"
    SHP = "SHP"
    SLE = "SLE"
    SLL = "SLL"
    SOS = "SOS"
    SRD = "SRD"
    SSP = "SSP"
    STN = "STN"
    SVC = "SVC"
    SZL = "SZL"
    THB = "THB"
    TND = "TND"
    TOP = "TOP"
    TRY = "TRY"
    TTD = "TTD"
    TWD = "TWD"
    TZS = "TZS"
    UAH = "UAH"
    UGX = "UGX"
    USD = "USD"
    UYU = "UYU"
    UZS = "UZS"
    VES = "VES"
    VND = "VND"
    VUV = "VUV"
    WST = "WST"
    XAF = "XAF"
    XCD = "XCD"
    XOF = "XOF"
    XPF = "XPF"
    YER = "YER"
    ZAR = "ZAR"
    ZMW = "ZMW"


class PaymentMethod(str, Enum):
    """Top-level payment method family."""

    CARD = "Card"
    TOKEN = "Token"
    PAYMENT_PROFILE = "PaymentProfile"
    CASH = "Cash"
    CHEQUE = "Cheque"
    INTERAC = "Interac"
    APPLE_PAY = "ApplePay"
    ANDROID_PAY = "AndroidPay"
    THREE_D_SECURE = "3d_secure"
    PROCESSOR_TOKEN = "ProcessorToken"


class CaptureMethod(str, Enum):
    """When funds are captured after authorization."""

    AUTOMATIC = "Automatic"
    MANUAL = "Manual"
    MANUAL_MULTIPLE = "ManualMultiple"
    SCHEDULED = "Scheduled"


class AuthenticationType(str, Enum):
    """Whether 3DS authentication is requested."""

    THREE_DS = "ThreeDs"
    NO_THREE_DS = "NoThreeDs"


class PaymentExperience(str, Enum):
    """How the customer completes the payment."""

    REDIRECT_TO_URL = "RedirectToUrl"
    INVOKE_SDK_CLIENT = "InvokeSdkClient"
    DISPLAY_QR_CODE = "DisplayQrCode"
    ONE_CLICK = "OneClick"
    LINK_WALLET = "LinkWallet"
    INVOKE_PAYMENT_APP = "InvokePaymentApp"
    DISPLAY_WAIT_SCREEN = "DisplayWaitScreen"


class PaymentMethodType(str, Enum):
    """Concrete payment method within a family."""

    ACH = "Ach"
    AFFIRM = "Affirm"
    AFTERPAY_CLEARPAY = "AfterpayClearpay"
    ALFAMART = "Alfamart"
    ALI_PAY = "AliPay"
    ALI_PAY_HK = "AliPayHk"
    ALMA = "Alma"
    APPLE_PAY = "ApplePay"
    ATOME = "Atome"
    BACS = "Bacs"
    BANCONTACT_CARD = "BancontactCard"
    BECS = "Becs"
    BENEFIT = "Benefit"
    BIZUM = "Bizum"
    BLIK = "Blik"
    BOLETO = "Boleto"
    BCA_BANK_TRANSFER = "BcaBankTransfer"
    BNI_VA = "BniVa"
    BRI_VA = "BriVa"
    CARD_REDIRECT = "CardRedirect"
    CIMB_VA = "CimbVa"
    CLASSIC_REWARD = "classic"
    CREDIT = "Credit"
    CRYPTO_CURRENCY = "CryptoCurrency"
    CASHAPP = "Cashapp"
    DANA = "Dana"
    DANAMON_VA = "DanamonVa"
    DEBIT = "Debit"
    DUIT_NOW = "DuitNow"
    EFECTY = "Efecty"
    EPS = "Eps"
    FPS = "Fps"
    EVOUCHER = "Evoucher"
    GIROPAY = "Giropay"
    GIVEX = "Givex"
    GOOGLE_PAY = "GooglePay"
    GO_PAY = "GoPay"
    GCASH = "Gcash"
    IDEAL = "Ideal"
    INTERAC = "Interac"
    INDOMARET = "Indomaret"
    KLARNA = "Klarna"
    KAKAO_PAY = "KakaoPay"
    LOCAL_BANK_REDIRECT = "LocalBankRedirect"
    MANDIRI_VA = "MandiriVa"
    KNET = "Knet"
    MB_WAY = "MbWay"
    MOBILE_PAY = "MobilePay"
    MOMO = "Momo"
    MOMO_ATM = "MomoAtm"
    MULTIBANCO = "Multibanco"
    ONLINE_BANKING_THAILAND = "OnlineBankingThailand"
    ONLINE_BANKING_CZECH_REPUBLIC = "OnlineBankingCzechRepublic"
    ONLINE_BANKING_FINLAND = "OnlineBankingFinland"
    ONLINE_BANKING_FPX = "OnlineBankingFpx"
    ONLINE_BANKING_POLAND = "OnlineBankingPoland"
    ONLINE_BANKING_SLOVAKIA = "OnlineBankingSlovakia"
    OXXO = "Oxxo"
    PAGO_EFECTIVO = "PagoEfectivo"
    PERMATA_BANK_TRANSFER = "PermataBankTransfer"
    OPEN_BANKING_UK = "OpenBankingUk"
    PAY_BRIGHT = "PayBright"
    PAYPAL = "Paypal"
    PIX = "Pix"
    PAY_SAFE_CARD = "PaySafeCard"
    PRZELEWY24 = "Przelewy24"
    PROMPT_PAY = "PromptPay"
    PSE = "Pse"
    RED_COMPRA = "RedCompra"
    RED_PAGOS = "RedPagos"
    SAMSUNG_PAY = "SamsungPay"
    SEPA = "Sepa"
    SOFORT = "Sofort"
    SWISH = "Swish"
    TOUCH_NGO = "TouchNGo"
    TRUSTLY = "Trustly"
    TWINT = "Twint"
    UPI_COLLECT = "UpiCollect"
    UPI_INTENT = "UpiIntent"
    VIPPS = "Vipps"
    VIET_QR = "VietQr"
    VENMO = "Venmo"
    WALLEY = "Walley"
    WE_CHAT_PAY = "WeChatPay"
    SEVEN_ELEVEN = "SevenEleven"
    LAWSON = "Lawson"
    MINI_STOP = "MiniStop"
    FAMILY_MART = "FamilyMart"
    SEICOMART = "Seicomart"
    PAY_EASY = "PayEasy"
    LOCAL_BANK_TRANSFER = "LocalBankTransfer"
    MIFINITY = "Mifinity"


CANONICAL_DEFAULTS: Dict[Type[Enum], Enum] = {
    AttemptStatus: AttemptStatus.STARTED,
    Currency: Currency.USD,
    PaymentMethod: PaymentMethod.CARD,
    CaptureMethod: CaptureMethod.AUTOMATIC,
    AuthenticationType: AuthenticationType.THREE_DS,
    PaymentExperience: PaymentExperience.REDIRECT_TO_URL,
    PaymentMethodType: PaymentMethodType.CARD_REDIRECT,
}


__all__ = [
    "AttemptStatus",
    "Currency",
    "PaymentMethod",
    "CaptureMethod",
    "AuthenticationType",
    "PaymentExperience",
    "PaymentMethodType",
    "CANONICAL_DEFAULTS",
]
