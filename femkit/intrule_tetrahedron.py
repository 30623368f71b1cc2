"""Symmetric cubature rules on the reference tetrahedron."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from femkit.intrule import IntRule

_Bary = tuple[float, float, float, float]


def _perm4(a: float) -> list[_Bary]:
    return [(a, a, a, a)]


def _perm31(a: float) -> list[_Bary]:
    b = 1.0 - 3.0 * a
    return [(a, a, a, b), (a, a, b, a), (a, b, a, a), (b, a, a, a)]


def _perm22(a: float) -> list[_Bary]:
    b = 0.5 - a
    return [
        (a, a, b, b), (a, b, a, b), (a, b, b, a),
        (b, a, b, a), (b, a, a, b), (b, b, a, a),
    ]


def _perm211(a: float, b: float) -> list[_Bary]:
    c = 1.0 - a - a - b
    return [
        (a, a, b, c), (a, a, c, b), (a, b, a, c), (a, b, c, a),
        (a, c, a, b), (a, c, b, a), (b, a, a, c), (b, a, c, a),
        (b, c, a, a), (c, a, a, b), (c, a, b, a), (c, b, a, a),
    ]


def _perm0111(p: float, a: float, b: float, c: float) -> list[_Bary]:
    return [
        (p, a, b, c), (p, a, c, b), (p, b, a, c),
        (p, b, c, a), (p, c, a, b), (p, c, b, a),
    ]


def _perm1111(a: float, b: float, c: float) -> list[_Bary]:
    d = 1.0 - a - b - c
    return (
        _perm0111(a, b, c, d)
        + _perm0111(b, a, c, d)
        + _perm0111(c, a, b, d)
        + _perm0111(d, a, b, c)
    )


_ORBITS: dict[str, Callable[..., list[_Bary]]] = {
    "4": _perm4,
    "31": _perm31,
    "22": _perm22,
    "211": _perm211,
    "1111": _perm1111,
}

# Each entry: (orbit kind, weight before the 1/6 volume factor, orbit parameters).
_Entry = tuple[str, float, tuple[float, ...]]

_TABLES: dict[int, list[_Entry]] = {
    1: [
        ("4", 1.0, (0.25,)),
    ],
    2: [
        ("31", 0.25, (0.13819660112501051517954131656343619,)),
    ],
    3: [
        ("31", 0.13852796651186214232361769837564129, (0.32805469671142664733580581998119743,)),
        ("31", 0.11147203348813785767638230162435871, (0.10695227393293068277170204157061650,)),
    ],
    4: [
        ("31", 0.07349304311636194934358694586367885, (0.09273525031089122628655892066032137,)),
        ("31", 0.11268792571801585036501492847638892, (0.31088591926330060975814749494040332,)),
        ("22", 0.04254602077708146686093208377328816, (0.04550370412564965000000000000000000,)),
    ],
    5: [
        ("31", 0.11268792571801585079918565233328633, (0.31088591926330060979734573376345783,)),
        ("31", 0.07349304311636194954371020548632750, (0.09273525031089122640232391373703061,)),
        ("22", 0.04254602077708146643806942812025744, (0.04550370412564964949188052627933943,)),
    ],
    6: [
        ("31", 0.03992275025816749209969062755747998, (0.21460287125915202928883921938628499,)),
        ("31", 0.01007721105532064294801323744593686, (0.04067395853461135311557944895641006,)),
        ("31", 0.05535718154365472209515327785372602, (0.32233789014227551034399447076249213,)),
        ("211", 27.0 / 560.0, (0.06366100187501752529923552760572698,
                                0.60300566479164914136743113906093969)),
    ],
    7: [
        ("4", 0.09548528946413084886057843611722638, (0.25,)),
        ("31", 0.04232958120996702907628617079854674, (0.31570114977820279942342999959331149,)),
        ("22", 0.03189692783285757993427482408294246, (0.05048982259839636876305382298656247,)),
        ("211", 0.03720713072833462136961556119148112, (0.18883383102600104773643110385458576,
                                                         0.57517163758700002348324157702230752)),
        ("211", 0.00811077082990334156610343349109654, (0.02126547254148324598883610149981994,
                                                         0.81083024109854856111810537984823239)),
    ],
    8: [
        ("31", 0.00639714777990232132145142033517302, (0.03967542307038990126507132953938949,)),
        ("31", 0.04019044802096617248816115847981783, (0.31448780069809631378416056269714830,)),
        ("31", 0.02430797550477032117486910877192260, (0.10198669306270330000000000000000000,)),
        ("31", 0.05485889241369744046692412399039144, (0.18420369694919151227594641734890918,)),
        ("22", 0.03571961223409918246495096899661762, (0.06343628775453989240514123870189827,)),
        ("211", 0.00718319069785253940945110521980376, (0.02169016206772800480266248262493018,
                                                         0.71993192203946593588943495335273478)),
        ("211", 0.01637218194531911754093813975611913, (0.20448008063679571424133557487274534,
                                                         0.58057719012880922417539817139062041)),
    ],
    9: [
        ("4", 0.05642669317950620658871504327612541, (0.25,)),
        ("31", 0.00334109507471348040299974430471765, (0.03402217700104486646540370887876764,)),
        ("31", 0.03011375476877376390731423843157491, (0.32277033353380052539137668325496398,)),
        ("31", 0.00649096092006153463576211689456861, (0.06045707742577493000000000000000000,)),
        ("211", 0.00980928586825458643196874259255500, (0.45536299094720821180030815044164301,
                                                         0.00568317736533017990610016014574474)),
        ("211", 0.02811915382336547255163261742529262, (0.11950225539382580097797370469611438,
                                                         0.46311683247848994097622449365772955)),
        ("211", 0.00789458690833150076834149200960885, (0.02802195578340115815505750665412373,
                                                         0.72520607683986748873856595428480993)),
        ("211", 0.01949281204723999671697219448924602, (0.17483303201157461578532464597224522,
                                                         0.61668257178125640457068309097954073)),
    ],
    10: [
        ("4", 0.04739977355602073838473882117805110, (0.25,)),
        ("31", 0.02693705999226869980276416100488208, (0.31225006869518864772980831868682746,)),
        ("31", 0.00986915971679338323455773543017308, (0.11430965385734615058737119765365045,)),
        ("211", 0.00036194434433925362423987838480851, (0.00613800882479074784759371324841535,
                                                         0.94298876734520486619763058691825076)),
        ("211", 0.01013587167975579278851647011501678, (0.03277946821644267077472102033232419,
                                                         0.34018479408710763278898792494967132)),
        ("211", 0.01139388122019523162362093488071434, (0.41043073921896549428789784425151169,
                                                         0.16548602561961105160449012444452641)),
        ("211", 0.00657614727703590416745574020045070, (0.03248528156482304783551493997842620,
                                                         0.13385215221200951309782843596456662)),
        ("211", 0.02573973198045607127903601225965471, (0.12105018114558942599389500159505053,
                                                         0.47719037990428035054410640829690722)),
        ("211", 0.01290703579886199063929543024949899, (0.17497934218393902428494922652831040,
                                                         0.62807184547536601069327607221790967)),
    ],
    11: [
        ("4", 0.03943210802865886350733033449120443, (0.25,)),
        ("31", 0.01566212622727911315008856276876506, (0.12149136777653379449770230990807224,)),
        ("31", 0.00333217237490140814440923615401491, (0.03231625915107289635395445208958103,)),
        ("31", 0.01402607740748974743749136099769235, (0.32492614978860679781284190241442197,)),
        ("211", 0.00108590752933246630682209837723547, (0.00414835697166001200000000000001000,
                                                         0.59826599679018635020545384277617780)),
        ("211", 0.02023596043066317891111657316540838, (0.22462461067637714141447515116498644,
                                                         0.47366228783234957140836966920205236)),
        ("211", 0.01179021487212586353684938046770181, (0.05190508777256569674422721644265892,
                                                         0.56314477790827989873710197630305713)),
        ("211", 0.00769031498252129590113157802073890, (0.13493013121624020422375917234299303,
                                                         0.70835883078581895385699500512712996)),
        ("211", 0.00443730570345920390473072602143959, (0.02519119210825247292005118506530550,
                                                         0.78371950734007737543057403429990901)),
        ("211", 0.01142954846718404041077055259859402, (0.36531877978173361396933198009886720,
                                                         0.13460390831686580000000000000001000)),
        ("1111", 0.00618564017121781141281925508389534, (0.52290753950993847296521692758602923,
                                                          0.14075363054369590184253913949127849,
                                                          0.00976243819645261550829228038997777)),
    ],
    12: [
        ("31", 0.01276763770097074150203778596512505, (0.11529974435148014530455720738915911,)),
        ("31", 0.01612110423790926821858154489575762, (0.20233628224059090000000000000001000,)),
        ("31", 0.00037161269857844220004255818986081, (0.01171759795761995151247906754831398,)),
        ("31", 0.01971744178668545763955330903818868, (0.31330644136780106727760279964458934,)),
        ("31", 0.00257139093086271836218234759448548, (0.25000573011558370000000000000001000,)),
        ("22", 0.00381724787051057590575318412783326, (0.02099547435075800669020182527059018,)),
        ("22", 0.01208722707766311317860318419314605, (0.15177401824745010000000000000001000,)),
        ("211", 0.00310586115843473343431688149929620, (0.02441977874343536478314000904761661,
                                                         0.84832928469787285064520886743481574)),
        ("211", 0.00545953133647103066912742126769441, (0.25620709853201830896382010708562210,
                                                         0.48248737387384884780289289672973542)),
        ("211", 0.00214289974849699750666852093655947, (0.01679032097960299061471796028857942,
                                                         0.69477194236575592695949850988417719)),
        ("211", 0.00552467146725782962244930098165075, (0.12616082113987204239970703846895919,
                                                         0.72541048930294811897485950521263380)),
        ("211", 0.00853695669449918042985177836672201, (0.43143517452637984721670695066371957,
                                                         0.11272193989285241520959977211007542)),
        ("1111", 0.01151017784832330697333644123403294, (0.50167006246250569747515507168476130,
                                                          0.27247180286952239178351046753060445,
                                                          0.07207432880729891465015948456335820)),
        ("1111", 0.00520387865288561360396792421252454, (0.26164485453781874566945505006396799,
                                                          0.08629229194706173191742351944352488,
                                                          0.02056541065587613830062489762710900)),
    ],
    13: [
        ("4", 0.01501368777308314675062970631615983, (0.25,)),
        ("31", 0.01822520928017342532379068941490097, (0.15521609351908950314115784335704739,)),
        ("31", 0.00700610921774146424038518693926311, (0.33012266333967360024433192595196779,)),
        ("22", 0.01642354974394954829540573107905531, (0.16680640389386249928937782601144234,)),
        ("22", 0.00512061009636059707262596949702171, (0.02492378854777361779701400374860089,)),
        ("22", 0.01119669865290491634382032086351956, (0.09719762991575100143072243716240818,)),
        ("211", 0.01561914973337995400953811302431969, (0.24785929015736256692746910620827934,
                                                         0.43365324235685144718726061434767377)),
        ("211", 0.00248442301331647441904056776338473, (0.02223159608186700290879521860892929,
                                                         0.83690032040373400514509486595698594)),
        ("211", 0.00163859853481823893844525309440751, (0.10727869331305341049150459639584801,
                                                         0.77498030597500180756587877274179289)),
        ("211", 0.00590303044012492197171914655535865, (0.19817684388398981142331840582142759,
                                                         0.58756930578220530259172017903595920)),
        ("211", 0.01102208245821805240445097989201525, (0.06917924347737931647732534347465502,
                                                         0.60420006666006644707935264871115302)),
        ("211", 0.00040645183996417822585155512755848, (0.02311471947193316000000000000001000,
                                                         0.93087579279244424864920228882888307)),
        ("1111", 0.00268796997296854209745781926651729, (0.11788928751019608922290117470644250,
                                                          0.11651536422540720000000000000001000,
                                                          0.04202400112551542095676634303719997)),
        ("1111", 0.00197950480552671190531894675510740, (0.67703279860228426355032221326746594,
                                                          0.04616537602461971083458041122176081,
                                                          0.00084434031890503975729899692135905)),
        ("1111", 0.00544631918142579120943187040108667, (0.48489008867363312201080094154790828,
                                                          0.35888294295520201572423646909421086,
                                                          0.13818283491762872996955080907912355)),
    ],
    14: [
        ("31", 0.00406511366527076704362088368356360, (0.32725336252384856390930966926852893,)),
        ("31", 0.00221453853344557814375995695000715, (0.04476130446668508088379420964788419,)),
        ("31", 0.00581343826788845054953733388214554, (0.08614033110243635365372087402988575,)),
        ("31", 0.01962554338583572159756233339617148, (0.20876264250043229682653570839761758,)),
        ("31", 0.00038757379059082143645387212483937, (0.01410497380292096006358791521029282,)),
        ("211", 0.01164297197217703698552134010055516, (0.10216532418077681234766925269825839,
                                                         0.57394636759433382028140028934601068)),
        ("211", 0.00528904298828171313177368830528561, (0.40757005166001071572132956513017833,
                                                         0.09222787013902013000000000000000000)),
        ("211", 0.00183108541636005593766978234880692, (0.01566400074028035855575867095780840,
                                                         0.70128109595894403271399676732084261)),
        ("211", 0.00824964737721464520674496691736603, (0.22549635625250290537807241542011034,
                                                         0.47690639744208871158605833541070112)),
        ("1111", 0.00300992453470824513768887482089866, (0.39059842812814580000000000000000000,
                                                          0.20135905441239221681230773272350923,
                                                          0.01611228807103002985780269315483708)),
        ("1111", 0.00080471656173675346362618087603116, (0.10613506799890214555561390298480794,
                                                          0.03273581868172692849440040779126601,
                                                          0.00359790765372716669079715233859245)),
        ("1111", 0.00298504125884930711876556928839215, (0.56363837316977438968968166306485017,
                                                          0.23029207223006574545025268741356515,
                                                          0.19071993417435518627124877906378985)),
        ("1111", 0.00568960024187607669633614778119730, (0.36762550953258608440922067759911669,
                                                          0.20788513802300449507171021252507348,
                                                          0.33121048851934490000000000000000000)),
        ("1111", 0.00415908658785457156700139801826135, (0.71923236898172952950234018407969909,
                                                          0.17632791180193297621579930336369727,
                                                          0.02076023625713100907549734406116442)),
        ("1111", 0.00072823892045727243561364297456536, (0.52782499521529872984092400758172763,
                                                          0.43728908922034181655262387608419181,
                                                          0.00922016518566419494631775549492202)),
        ("1111", 0.00543265007699582482162423406519264, (0.54836745449481907289949105056077457,
                                                          0.34478155061716412287036718709203314,
                                                          0.08672172833222153946294387400858277)),
    ],
}

_MAX_TABLE_ORDER = 14


def _expand(entries: Sequence[_Entry]) -> tuple[np.ndarray, np.ndarray]:
    points: list[tuple[float, float, float]] = []
    weights: list[float] = []
    for kind, weight, params in entries:
        for bary in _ORBITS[kind](*params):
            points.append((bary[1], bary[2], bary[3]))
            weights.append(weight / 6.0)
    return np.array(points, dtype=float), np.array(weights, dtype=float)


def symmetric_cubature_rule(order: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the (n, 3) points and n weights of the symmetric rule of ``order``.

    Orders above 14 fall back to the order-14 rule; orders 0 and 1 share the
    one-point centroid rule.
    """
    if order < 0:
        raise ValueError(f"cubature order {order} is negative")
    order = min(max(order, 1), _MAX_TABLE_ORDER)
    return _expand(_TABLES[order])


class IntRuleTetrahedron(IntRule):
    """Symmetric rule on the tetrahedron with corners at the origin and unit axes."""

    dimension = 3
    max_order = _MAX_TABLE_ORDER

    def set_order(self, order: int) -> None:
        self._check_order(order)
        self._points, self._weights = symmetric_cubature_rule(order)
        self._order = order